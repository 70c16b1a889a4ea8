"""Provider Model Catalog - Schemas Package"""

from provider_catalog.schemas.catalog import (
    Datacenter,
    Model,
    ModelCatalogResponse,
    OpenRouterInfo,
    Pricing,
    WireModel,
)
from provider_catalog.schemas.enums import (
    Feature,
    InputModality,
    OutputModality,
    Quantization,
    SamplingParameter,
)

__all__ = [
    # Records
    "ModelCatalogResponse",
    "Model",
    "Pricing",
    "OpenRouterInfo",
    "Datacenter",
    "WireModel",
    # Enumerations
    "InputModality",
    "OutputModality",
    "Quantization",
    "SamplingParameter",
    "Feature",
]
