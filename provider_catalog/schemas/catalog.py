"""
Provider Model Catalog - Pydantic Schemas for the Models Listing
================================================================
Response envelope for the provider list-models endpoint and the records
nested inside it.

Optional fields are present-or-omitted: leaving one unset means the key is
absent from the wire document. An explicit ``null`` is never produced and is
rejected on input.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_serializer,
)
from pydantic_core import PydanticCustomError

from provider_catalog.schemas.enums import (
    Feature,
    InputModality,
    OutputModality,
    Quantization,
    SamplingParameter,
)


class WireModel(BaseModel):
    """Immutable base for every catalog record."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise PydanticCustomError(
                "null_not_allowed",
                "{field} must not be null; omit the key instead",
                {"field": info.field_name},
            )
        return value

    @field_validator("*")
    @classmethod
    def require_utf8_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError:
                raise PydanticCustomError(
                    "string_not_utf8",
                    "Text must be encodable as UTF-8 (lone surrogates are not allowed)",
                ) from None
        return value

    @model_serializer(mode="wrap")
    def omit_unset_optionals(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Required fields can never hold None, so None only marks an unset optional
        return {key: value for key, value in handler(self).items() if value is not None}


# ============================================
# Nested Records
# ============================================


class OpenRouterInfo(WireModel):
    """Routing metadata assigned by OpenRouter."""

    slug: StrictStr = Field(
        ...,
        description="OpenRouter model slug",
        examples=["anthropic/claude-sonnet-4"],
    )


class Pricing(WireModel):
    """USD pricing. Rates are decimal strings so no float rounding ever applies."""

    prompt: StrictStr = Field(..., description="Price per prompt token")
    completion: StrictStr = Field(..., description="Price per completion token")

    image: StrictStr | None = Field(default=None, description="Price per input image")
    request: StrictStr | None = Field(default=None, description="Flat price per request")
    input_cache_read: StrictStr | None = Field(
        default=None, description="Price per cached prompt token read"
    )
    input_cache_write: StrictStr | None = Field(
        default=None, description="Price per prompt token written to cache"
    )

    @classmethod
    def new(cls, prompt: str, completion: str) -> "Pricing":
        """Build pricing with only the required prompt and completion rates."""
        return cls(prompt=prompt, completion=completion)


class Datacenter(WireModel):
    """A location the model is served from."""

    country_code: StrictStr = Field(
        ...,
        description="ISO 3166-1 alpha-2 country code",
        examples=["US", "DE"],
    )

    @classmethod
    def new(cls, country_code: str) -> "Datacenter":
        return cls(country_code=country_code)


# ============================================
# Model Entry
# ============================================


class Model(WireModel):
    """A model available from the provider."""

    id: StrictStr = Field(
        ...,
        description="Model identifier",
        examples=["anthropic/claude-sonnet-4"],
    )

    name: StrictStr = Field(..., description="Display name")

    created: StrictInt = Field(..., description="Unix timestamp of model creation")

    input_modalities: tuple[InputModality, ...] = Field(
        ..., description="Accepted input modalities"
    )
    output_modalities: tuple[OutputModality, ...] = Field(
        ..., description="Produced output modalities"
    )

    quantization: Quantization = Field(..., description="Weight precision")

    context_length: StrictInt = Field(..., ge=0, description="Max input tokens")
    max_output_length: StrictInt = Field(..., ge=0, description="Max output tokens")

    pricing: Pricing = Field(..., description="USD pricing")

    supported_sampling_parameters: tuple[SamplingParameter, ...] = Field(
        ..., description="Sampling parameters honoured by the model"
    )
    supported_features: tuple[Feature, ...] = Field(
        ..., description="Capabilities supported by the model"
    )

    # Optional metadata, omitted from the wire when unset
    openrouter: OpenRouterInfo | None = Field(
        default=None, description="OpenRouter routing info"
    )

    hugging_face_id: StrictStr | None = Field(
        default=None,
        description="Hugging Face repository id. Required for Hugging Face models.",
    )

    description: StrictStr | None = Field(default=None, description="Model description")

    datacenters: tuple[Datacenter, ...] | None = Field(
        default=None,
        description="Serving locations. Unset is distinct from an empty sequence.",
    )


# ============================================
# Response Envelope
# ============================================


class ModelCatalogResponse(WireModel):
    """Response body for the list models endpoint."""

    data: tuple[Model, ...] = Field(..., description="Available models, in server order")
