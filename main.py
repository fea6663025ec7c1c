import logging

import uvicorn

from toolbridge.config import settings
from toolbridge.server import app

if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
