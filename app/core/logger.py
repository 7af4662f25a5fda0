# app/core/logger.py
from loguru import logger
import sys

from app.core.config import settings

# Configure logger format; level comes from LOG_LEVEL
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level: <8}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "{message}",
    level=settings.LOG_LEVEL.upper(),
)

__all__ = ["logger"]
