import os
from dotenv import load_dotenv

load_dotenv()


class ClientSettings:
    def __init__(self):
        # optional environment variables, if not set defaults will be used
        self.api_url = os.getenv('INVENTORY_API_URL', 'http://127.0.0.1:8000')
        self.timeout = float(os.getenv('INVENTORY_API_TIMEOUT', '30'))


client_settings = ClientSettings()
