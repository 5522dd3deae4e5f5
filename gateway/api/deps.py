# ==============================
# API Dependencies / Singletons
# ==============================
from __future__ import annotations

from functools import lru_cache

from embeddata.config.loader import load_settings
from embeddata.config.schema import Settings
from embeddata.logging.logger import bootstrap_logger
from embeddata.parsers.registry import ParserRegistry, default_registry


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = load_settings()
    bootstrap_logger(settings)
    return settings


@lru_cache(maxsize=1)
def get_registry() -> ParserRegistry:
    get_settings()  # ensure logging is bootstrapped before any parser runs
    return default_registry()
