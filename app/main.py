# app/main.py
import logging

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.config import settings


def _configure_logging(level: str) -> None:
    """コンソールにログを出すためのハンドラを root に直付けする。"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
    root.setLevel(level.upper())


_configure_logging(settings.log_level)

app = FastAPI(title="Writing Analyzer")

app.include_router(api_router, prefix="/api")
