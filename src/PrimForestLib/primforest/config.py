"""
Configuration module for primforest.
Centralizes all configuration values.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Graph
DEFAULT_VERTEX_COUNT = int(os.getenv("PRIMFOREST_DEFAULT_VERTEX_COUNT", "50"))

# Random generation
DEFAULT_DENSITY = float(os.getenv("PRIMFOREST_DEFAULT_DENSITY", "0.2"))
DEFAULT_MIN_WEIGHT = float(os.getenv("PRIMFOREST_DEFAULT_MIN_WEIGHT", "1.0"))
DEFAULT_MAX_WEIGHT = float(os.getenv("PRIMFOREST_DEFAULT_MAX_WEIGHT", "10.0"))

# Rendering: значащих цифр в весе ребра
RENDER_PRECISION = int(os.getenv("PRIMFOREST_RENDER_PRECISION", "2"))

# Logging
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def resolve_log_level(name) -> str:
    """Имя уровня логирования; неизвестные значения заменяются на INFO"""
    name = (name or "").upper()
    return name if name in LOG_LEVELS else "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
