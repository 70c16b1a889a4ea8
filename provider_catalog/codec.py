"""
Provider Model Catalog - JSON Codec
===================================
Converts between wire documents and typed catalog values.

Both directions are pure and hold no shared state, so they are safe to call
from any number of threads at once.
"""

from typing import TypeVar

from pydantic import ValidationError

from provider_catalog.errors import MalformedJsonError, SchemaMismatchError
from provider_catalog.logging_config import get_logger
from provider_catalog.schemas.catalog import ModelCatalogResponse, WireModel

logger = get_logger(__name__)

T = TypeVar("T", bound=WireModel)

# Error types pydantic reports when the document itself is unusable
_JSON_ERROR_TYPES = {"json_invalid", "json_type"}


def decode(data: str | bytes, schema: type[T] = ModelCatalogResponse) -> T:
    """
    Parse a JSON document into a typed catalog value.

    Args:
        data: JSON text or UTF-8 encoded bytes
        schema: Record type of the document root

    Returns:
        Validated, immutable instance of ``schema``

    Raises:
        MalformedJsonError: If the input is not JSON or its root is not an object
        SchemaMismatchError: If the JSON does not match the schema
    """
    try:
        value = schema.model_validate_json(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_input=False)

        # A failure at the root location means the top-level value was not an object
        if any(err["type"] in _JSON_ERROR_TYPES or not err["loc"] for err in errors):
            logger.debug(
                "Catalog decode failed",
                error_type=MalformedJsonError.error_type,
                schema=schema.__name__,
            )
            raise MalformedJsonError(
                f"Invalid JSON document for {schema.__name__}: {errors[0]['msg']}",
                errors=errors,
            ) from e

        logger.debug(
            "Catalog decode failed",
            error_type=SchemaMismatchError.error_type,
            schema=schema.__name__,
            error_count=len(errors),
        )
        raise SchemaMismatchError(
            f"{len(errors)} schema error(s) in {schema.__name__}: "
            + "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in errors
            ),
            errors=errors,
        ) from e

    if isinstance(value, ModelCatalogResponse):
        logger.debug("Catalog decoded", model_count=len(value.data))
    return value


def encode(value: WireModel, *, indent: int | None = None) -> str:
    """
    Render a catalog value as a JSON document.

    Unset optional fields are left out entirely, enums are written as their
    wire strings and sequences keep their stored order.
    """
    return value.model_dump_json(indent=indent)


def encode_bytes(value: WireModel) -> bytes:
    """Render a catalog value as UTF-8 encoded JSON."""
    return encode(value).encode("utf-8")
