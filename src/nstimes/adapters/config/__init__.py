"""Configuration adapters."""

from nstimes.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
