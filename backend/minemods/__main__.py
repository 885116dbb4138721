"""Run the API server: python -m minemods"""
import logging

import uvicorn

from minemods.config import settings


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("minemods.main:app", host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
