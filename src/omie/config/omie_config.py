"""
Omie Configuration Types and Schema
Type-safe configuration objects for the Omie SDK
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


# Base URL for the Omie API
OMIE_BASE_URL = "https://app.omie.com.br/api"


class ConfigDefaults:
    """Default configuration values"""
    BASE_URL = OMIE_BASE_URL
    TIMEOUT = None
    ENABLE_AUDIT_LOG = False


# Environment variable mapping
ENV_VAR_MAPPING = {
    "OMIE_APP_KEY": "app_key",
    "OMIE_APP_SECRET": "app_secret",
    "OMIE_BASE_URL": "base_url",
    "OMIE_TIMEOUT": "timeout",
    "OMIE_ENABLE_AUDIT_LOG": "enable_audit_log",
}


class OmieConfig(BaseModel):
    """
    Main Omie Configuration class

    Credentials are optional here: a connection without them can be built,
    but every request made through it fails with MissingCredentialsError.
    """

    # Credentials issued by the Omie developer portal
    app_key: Optional[str] = Field(
        default=None,
        description="Application key"
    )
    app_secret: Optional[str] = Field(
        default=None,
        description="Application secret"
    )

    base_url: str = Field(
        default=ConfigDefaults.BASE_URL,
        description="Base URL every resource path is appended to"
    )
    timeout: Optional[int] = Field(
        default=ConfigDefaults.TIMEOUT,
        description="Request timeout in milliseconds (None: no timeout)",
        ge=1000,
        le=300000
    )

    enable_audit_log: bool = Field(
        default=ConfigDefaults.ENABLE_AUDIT_LOG,
        description="Enable audit logging"
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base_url is a valid URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        return v.rstrip("/")

    def has_credentials(self) -> bool:
        """Both app_key and app_secret are set and non-blank"""
        return bool(self.app_key) and bool(self.app_secret)
