"""Configuration management for the mod updater."""

from .settings import DEFAULT_CONFIG_PATH, UpdaterConfig

__all__ = ["UpdaterConfig", "DEFAULT_CONFIG_PATH"]
