"""Project-level configuration."""

from tabalign.lib.config.settings import TabalignConfig, load_config

__all__ = ["TabalignConfig", "load_config"]
