"""Configuration for ogpextract."""

from .config import Config, MonitoringConfig, ParserConfig, find_config_file

__all__ = ["Config", "MonitoringConfig", "ParserConfig", "find_config_file"]
