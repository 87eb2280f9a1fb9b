import logging

import uvicorn

from inventory_api.core.config import settings
from inventory_api.factory import create_app

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.app_host, port=settings.app_port)
