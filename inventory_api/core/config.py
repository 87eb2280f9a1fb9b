import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        # required environment variables, it will raise KeyError if not found
        self.database_url = os.environ['DATABASE_URL']
        self.secret_key = os.environ['SECRET_KEY']

        # optional environment variables, if not set defaults will be used
        self.app_host = os.getenv('APP_HOST', '127.0.0.1')
        self.app_port = int(os.getenv('APP_PORT', '8000'))

        self.session_expire_hours = int(os.getenv('SESSION_EXPIRE_HOURS', '8'))

        self.log_level = os.getenv('LOG_LEVEL', 'INFO')

        self.auto_create_schema = _as_bool(os.getenv('AUTO_CREATE_SCHEMA', 'true'))
        self.audit_enabled = _as_bool(os.getenv('AUDIT_ENABLED', 'true'))


settings = Settings()
