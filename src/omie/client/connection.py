"""
HTTP transport layer for the Omie API
Builds the call envelope, sends it and translates failures into SDK errors
"""

import json
import time
import uuid
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

import requests

from omie.config import ConfigLoader, OmieConfig
from omie.exceptions import (
    InvalidResponseError,
    MissingCredentialsError,
    RequestError,
)


logger = logging.getLogger(__name__)

# Omie reports every documented (client) error with this status
FAULT_STATUS_CODE = 500


@dataclass
class HttpAuditEntry:
    """Audit log entry for HTTP requests"""
    timestamp: str
    request_id: str
    call: str
    url: str
    body: Optional[Any] = None
    response: Optional[Dict[str, Any]] = None
    duration: int = 0  # milliseconds
    success: bool = False
    error: Optional[str] = None


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "app_key",
    "app_secret",
    "authorization",
]


class Connection:
    """
    Connection to the Omie API

    Omie selects the remote operation through the ``call`` member of the
    JSON body rather than through the URL or HTTP verb, so every request
    is a POST of the same envelope to a resource path.

    Example:
        >>> connection = Connection(OmieConfig(app_key="...", app_secret="..."))
        >>> connection.send("/v1/geral/clientes/", "ConsultarCliente",
        ...                 {"codigo_cliente_omie": 123})
    """

    def __init__(
        self,
        config: Optional[OmieConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or OmieConfig()
        self._audit_log_callback: Optional[Callable[[HttpAuditEntry], None]] = None
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        return session

    def _generate_request_id(self) -> str:
        """Generate unique request ID for traceability"""
        timestamp = hex(int(time.time() * 1000))[2:]
        unique_id = uuid.uuid4().hex[:8]
        return f"omie-{timestamp}-{unique_id}"

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                if str(key).lower() in SENSITIVE_FIELDS:
                    redacted[key] = "[REDACTED]"
                else:
                    redacted[key] = self._redact_sensitive_data(value)
            return redacted

        return obj

    def build_payload(
        self, call: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Build the request envelope for a call

        Raises:
            MissingCredentialsError: If app_key or app_secret is blank
        """
        if not self.config.has_credentials():
            raise MissingCredentialsError()

        return {
            "app_key": self.config.app_key,
            "app_secret": self.config.app_secret,
            "call": call,
            "param": [params if params is not None else {}],
        }

    def send(
        self,
        path: str,
        call: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Perform a call against the Omie API

        Args:
            path: Resource path appended to the base URL
            call: Name of the remote call, e.g. ``IncluirCliente``
            params: The single parameter object of the call

        Returns:
            The parsed JSON response

        Raises:
            MissingCredentialsError: If credentials are not configured
            RequestError: If Omie rejects the call with a fault payload
            InvalidResponseError: For any other failure
        """
        payload = self.build_payload(call, params)
        url = f"{self.config.base_url}{path}"
        request_id = self._generate_request_id()
        timeout = self.config.timeout / 1000.0 if self.config.timeout else None

        logger.debug(
            f"[{request_id}] POST {url} call={call} "
            f"payload={self._redact_sensitive_data(payload)}"
        )

        start_time = time.time()
        response: Optional[requests.Response] = None
        try:
            try:
                response = self._session.post(
                    url,
                    data=json.dumps(payload),
                    headers={"X-Request-ID": request_id},
                    timeout=timeout,
                )
            except requests.exceptions.RequestException as e:
                raise InvalidResponseError(
                    f"Request to {url} failed: {e}", cause=e
                ) from e

            result = self._handle_response(response)
        except (RequestError, InvalidResponseError) as e:
            self._log_audit(request_id, call, url, payload, start_time, response, e)
            raise

        self._log_audit(request_id, call, url, payload, start_time, response)
        return result

    def _handle_response(self, response: requests.Response) -> Any:
        """Parse a response body or raise the matching SDK error"""
        if response.status_code == FAULT_STATUS_CODE:
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                error = RequestError(response=response)
                logger.warning(f"Omie rejected the call: {error}")
                raise error

        if not 200 <= response.status_code < 300:
            raise InvalidResponseError(
                f"Invalid response received: HTTP {response.status_code}",
                response=response,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                "Invalid response received: body is not JSON",
                response=response,
                cause=e,
            ) from e

    def _log_audit(
        self,
        request_id: str,
        call: str,
        url: str,
        body: Dict[str, Any],
        start_time: float,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        if not (self.config.enable_audit_log and self._audit_log_callback):
            return

        response_data = None
        if response is not None:
            try:
                response_body = response.json()
            except ValueError:
                response_body = response.text[:500] if response.text else None
            response_data = {
                "statusCode": response.status_code,
                "body": self._redact_sensitive_data(response_body),
            }

        self._audit_log_callback(HttpAuditEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            request_id=request_id,
            call=call,
            url=url,
            body=self._redact_sensitive_data(body),
            response=response_data,
            duration=int((time.time() - start_time) * 1000),
            success=error is None,
            error=str(error) if error else None,
        ))

    def set_audit_log_callback(
        self, callback: Callable[[HttpAuditEntry], None]
    ) -> None:
        """Set audit log callback"""
        self._audit_log_callback = callback

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


_default_connection: Optional[Connection] = None


def configure(
    config: Optional[OmieConfig] = None, **options: Any
) -> Connection:
    """
    Set up the process-wide connection used by resources

    Without an explicit config, settings come from the environment
    (OMIE_APP_KEY, OMIE_APP_SECRET, ...) overridden by ``options``.

    Example:
        >>> omie.configure(app_key="...", app_secret="...")
    """
    global _default_connection

    if config is None:
        config = ConfigLoader().load(config=options)

    if _default_connection is not None:
        _default_connection.close()
    _default_connection = Connection(config)
    return _default_connection


def get_connection() -> Connection:
    """Return the process-wide connection, configuring it from the environment if unset"""
    if _default_connection is None:
        return configure()
    return _default_connection


def reset() -> None:
    """Drop the process-wide connection"""
    global _default_connection

    if _default_connection is not None:
        _default_connection.close()
    _default_connection = None
