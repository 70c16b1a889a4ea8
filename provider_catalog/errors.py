"""
Provider Model Catalog - Codec Errors
=====================================
Typed failures raised by the JSON codec.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for catalog codec failures."""

    error_type = "catalog_error"

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class MalformedJsonError(CatalogError):
    """Input is not a syntactically valid JSON object."""

    error_type = "malformed_json"


class SchemaMismatchError(CatalogError):
    """Valid JSON that does not match the catalog schema.

    Raised for missing required keys, wrong value types, unknown enum
    strings and explicit nulls on optional fields. ``errors`` holds one
    entry per offending location.
    """

    error_type = "schema_mismatch"

    @property
    def locations(self) -> list[tuple[int | str, ...]]:
        """Locations of every offending value, outermost key first."""
        return [tuple(err["loc"]) for err in self.errors]
