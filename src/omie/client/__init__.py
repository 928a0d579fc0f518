"""
HTTP Client module for the Omie SDK
"""

from omie.client.connection import (
    Connection,
    HttpAuditEntry,
    configure,
    get_connection,
    reset,
)

__all__ = [
    "Connection",
    "HttpAuditEntry",
    "configure",
    "get_connection",
    "reset",
]
