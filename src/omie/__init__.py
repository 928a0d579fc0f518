"""
Omie ERP API client for Python

Main entry point for the SDK
"""

from omie.client import (
    Connection,
    HttpAuditEntry,
    configure,
    get_connection,
    reset,
)
from omie.exceptions import (
    OmieError,
    RequestError,
    InvalidResponseError,
    MissingCredentialsError,
    ConfigError,
)

# Configuration
from omie.config import (
    OmieConfig,
    ConfigLoader,
    ConfigDefaults,
    OMIE_BASE_URL,
    ENV_VAR_MAPPING,
)

# Models
from omie.models import (
    BaseResource,
    OmieModel,
    Company,
    Product,
    SalesOrder,
    TaxRecommendation,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "Connection",
    "HttpAuditEntry",
    "configure",
    "get_connection",
    "reset",
    # Exceptions
    "OmieError",
    "RequestError",
    "InvalidResponseError",
    "MissingCredentialsError",
    "ConfigError",
    # Configuration
    "OmieConfig",
    "ConfigLoader",
    "ConfigDefaults",
    "OMIE_BASE_URL",
    "ENV_VAR_MAPPING",
    # Models
    "BaseResource",
    "OmieModel",
    "Company",
    "Product",
    "SalesOrder",
    "TaxRecommendation",
]
