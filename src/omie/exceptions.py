"""Exception classes for the Omie SDK"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests


class OmieError(Exception):
    """
    Base exception for Omie errors

    All errors in the SDK extend from this class. Rescue it to catch
    anything a request might raise.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        response: Optional[requests.Response] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code = status_code
        if self.status_code is None and response is not None:
            self.status_code = response.status_code
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return self.message or ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "status_code": self.status_code,
            "timestamp": self.timestamp.isoformat(),
        }

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)


class RequestError(OmieError):
    """
    Failed request with a JSON fault payload from Omie

    Omie answers every rejected call with HTTP 500 and a body holding
    ``faultstring`` and ``faultcode``, whatever the actual cause
    (validation failure, record not found, ...).
    """

    def __init__(
        self,
        message: Optional[str] = None,
        response: Optional[requests.Response] = None,
        fault_string: Optional[str] = None,
        fault_code: Optional[str] = None,
    ) -> None:
        if response is not None and fault_string is None and fault_code is None:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if isinstance(body, dict):
                fault_string = body.get("faultstring")
                fault_code = body.get("faultcode")

        self.fault_string = fault_string
        self.fault_code = fault_code
        super().__init__(
            message or f"Omie returned the error {fault_code}: '{fault_string}'",
            response=response,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["fault_code"] = self.fault_code
        data["fault_string"] = self.fault_string
        return data


class InvalidResponseError(OmieError):
    """Response Omie was not expected to send (any non-fault failure)"""


class MissingCredentialsError(OmieError):
    """Raised when app_key or app_secret is not configured"""

    def __init__(
        self, message: str = "Omie app_key and app_secret cannot be blank"
    ) -> None:
        super().__init__(message)


class ConfigError(OmieError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["code"] = self.code
        data["details"] = self.details
        return data
