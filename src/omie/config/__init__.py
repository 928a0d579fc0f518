"""
Configuration module
"""

from omie.config.omie_config import (
    OmieConfig,
    OMIE_BASE_URL,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from omie.config.config_loader import ConfigLoader

__all__ = [
    "OmieConfig",
    "OMIE_BASE_URL",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
]
