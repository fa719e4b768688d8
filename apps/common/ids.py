"""
Helpers for the opaque record ids used by weak references.

Ids arrive from URLs, query strings and stored records. A value that is not
a UUID can never match a row, so lookups treat it like an unknown id.
"""

import uuid
from typing import Any, Optional

from rest_framework import serializers


def as_uuid(value: Any) -> Optional[uuid.UUID]:
    """Return value as a UUID, or None when it is empty or malformed."""
    if not value:
        return None
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


def uuid_query_param(request, name: str) -> Optional[uuid.UUID]:
    """
    Read an optional id from the query string.

    Raises:
        serializers.ValidationError: If the parameter is present but not a
            UUID (DRF answers 400)
    """
    value = request.query_params.get(name)
    if not value:
        return None

    field = serializers.UUIDField()
    try:
        return field.to_internal_value(value)
    except serializers.ValidationError as e:
        raise serializers.ValidationError({name: e.detail})
