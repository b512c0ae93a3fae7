"""Entrypoint: `uvicorn src.main:app` or `python -m src.main`"""

import logging

import uvicorn

from src.api.app import create_app
from src.core import config
from src.db.database import init_db

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

init_db()
app = create_app()


def run() -> None:
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
