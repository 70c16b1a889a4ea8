"""Provider Model Catalog - typed schema and JSON codec for model listings.

Logging is left to the embedding application; call ``setup_logging()`` at
startup to use the bundled structlog pipeline.
"""

from provider_catalog.codec import decode, encode, encode_bytes
from provider_catalog.errors import (
    CatalogError,
    MalformedJsonError,
    SchemaMismatchError,
)
from provider_catalog.logging_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    "decode",
    "encode",
    "encode_bytes",
    "setup_logging",
    "CatalogError",
    "MalformedJsonError",
    "SchemaMismatchError",
]
