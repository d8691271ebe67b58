"""Configuration management for prize pool normalization."""

from .config_manager import PrizepoolConfigManager, PrizepoolSettings

__all__ = ["PrizepoolConfigManager", "PrizepoolSettings"]
