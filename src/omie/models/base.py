"""
Base models shared by every Omie resource

Field names follow the Portuguese names of the Omie API documentation so
payloads map one to one onto attributes.
"""

import logging
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from omie.client.connection import Connection, get_connection
from omie.exceptions import RequestError


logger = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseResource")


def is_blank(value: Any) -> bool:
    """None, whitespace-only strings and empty collections are blank"""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


class OmieModel(BaseModel):
    """
    Model populated from a mapping of attribute names to values

    Keys that do not name a declared field are ignored. Values are kept as
    given, except for fields annotated with another model, which are built
    from the mapping they receive.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    def __init__(self, data: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        values = dict(data or {})
        values.update(kwargs)
        fields = type(self).model_fields
        super().__init__(**{key: value for key, value in values.items() if key in fields})

    def update_attributes(self, data: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """Assign the given attributes, leaving the others untouched"""
        values = dict(data or {})
        values.update(kwargs)
        fields = type(self).model_fields
        for key, value in values.items():
            if key in fields:
                setattr(self, key, value)

    def to_payload(self) -> Dict[str, Any]:
        """Attributes explicitly set on this instance, ready to be sent"""
        return self.model_dump(exclude_unset=True)


class BaseResource(OmieModel):
    """
    Omie resource reachable through an API endpoint

    Subclasses declare the endpoint path, the table of remote calls and the
    fields identifying a record. Every class method accepts an optional
    ``connection``; the process-wide one is used when it is omitted.
    """

    PATH: ClassVar[str] = ""
    CALLS: ClassVar[Mapping[str, str]] = MappingProxyType({})
    ID_FIELD: ClassVar[str] = ""
    INTEGRATION_FIELD: ClassVar[str] = ""
    # Response member holding the collection returned by the list call
    LIST_KEY: ClassVar[str] = ""
    # Response member holding the record returned by the find call, if nested
    FIND_KEY: ClassVar[Optional[str]] = None
    LIST_DEFAULTS: ClassVar[Mapping[str, Any]] = MappingProxyType({
        "pagina": 1,
        "registros_por_pagina": 50,
        "apenas_importado_api": "N",
    })

    @classmethod
    def _call(cls, operation: str) -> str:
        try:
            return cls.CALLS[operation]
        except KeyError:
            raise NotImplementedError(
                f"{cls.__name__} does not support the '{operation}' operation"
            ) from None

    @classmethod
    def _send(
        cls,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> Any:
        call = cls._call(operation)
        connection = connection or get_connection()
        return connection.send(cls.PATH, call, dict(params or {}))

    @classmethod
    def _request_and_initialize(
        cls: Type[R],
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> R:
        return cls(cls._send(operation, params, connection))

    @classmethod
    def create(
        cls: Type[R],
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> R:
        """
        Record a new entry and return it as filled in by Omie

        Raises:
            RequestError: If Omie refuses the record, e.g. failed validations
        """
        return cls._request_and_initialize("create", params, connection)

    @classmethod
    def update(
        cls: Type[R],
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> R:
        """
        Change an existing entry

        Omie locates the record through the remote id or the integration
        code inside ``params`` and changes only the informed attributes.

        Raises:
            RequestError: On failed validations or when no record matches
        """
        return cls._request_and_initialize("update", params, connection)

    @classmethod
    def upsert(
        cls: Type[R],
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> R:
        """Create the entry, or update it when the integration code already exists"""
        return cls._request_and_initialize("upsert", params, connection)

    @classmethod
    def find(
        cls: Type[R],
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> Optional[R]:
        """
        Look an entry up by remote id or integration code

        Returns:
            The found entry, or None when Omie rejects the lookup
        """
        try:
            response = cls._send("find", params, connection)
        except RequestError as e:
            logger.info(f"{cls.__name__} not found: {e}")
            return None

        if cls.FIND_KEY:
            response = response.get(cls.FIND_KEY)
            if response is None:
                return None
        return cls(response)

    @classmethod
    def list(
        cls: Type[R],
        options: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> List[R]:
        """
        Get a page of entries

        Args:
            options: Overrides for the list defaults, e.g.
                ``{"pagina": 2, "registros_por_pagina": 20}`` (max 50 per page)

        Returns:
            The entries of the page, or an empty list when Omie rejects the call
        """
        params = dict(cls.LIST_DEFAULTS)
        params.update(options or {})

        try:
            response = cls._send("list", params, connection)
        except RequestError as e:
            logger.info(f"{cls.__name__} list returned nothing: {e}")
            return []

        return [cls(entry) for entry in response.get(cls.LIST_KEY) or []]

    @classmethod
    def associate(
        cls,
        remote_id: Any,
        integration_code: Any,
        connection: Optional[Connection] = None,
    ) -> bool:
        """
        Link an Omie record to a local integration code

        Returns:
            Whether Omie accepted the association
        """
        params = {cls.ID_FIELD: remote_id, cls.INTEGRATION_FIELD: integration_code}
        try:
            cls._send("associate", params, connection)
        except RequestError as e:
            logger.warning(
                f"Could not associate {cls.__name__} {remote_id} "
                f"with {integration_code}: {e}"
            )
            return False
        return True

    @classmethod
    def delete(
        cls,
        params: Optional[Mapping[str, Any]] = None,
        connection: Optional[Connection] = None,
    ) -> bool:
        """Remove an entry located by remote id or integration code"""
        cls._send("delete", params, connection)
        return True

    def is_saved(self) -> bool:
        """Whether this instance has a related record on Omie"""
        return not is_blank(getattr(self, self.ID_FIELD))

    def save(self: R, connection: Optional[Connection] = None) -> R:
        """
        Create the record on Omie, or update it when already saved

        The remote id of the result is copied back onto this instance.
        """
        payload = self.to_payload()
        if self.is_saved():
            result = type(self).update(payload, connection=connection)
        else:
            result = type(self).create(payload, connection=connection)

        if result is not None:
            setattr(self, self.ID_FIELD, getattr(result, self.ID_FIELD))
        return result

    def associate_entry(self, connection: Optional[Connection] = None) -> bool:
        """Associate this instance's remote id with its integration code"""
        return type(self).associate(
            getattr(self, self.ID_FIELD),
            getattr(self, self.INTEGRATION_FIELD),
            connection=connection,
        )
