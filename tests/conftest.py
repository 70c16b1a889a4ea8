"""
Shared fixtures for the catalog tests.
"""

import copy

import pytest

from provider_catalog.schemas import (
    Datacenter,
    Feature,
    InputModality,
    Model,
    ModelCatalogResponse,
    OpenRouterInfo,
    OutputModality,
    Pricing,
    Quantization,
    SamplingParameter,
)

MODEL_PAYLOAD = {
    "id": "org/model",
    "name": "Model",
    "created": 1700000000,
    "input_modalities": ["text", "image"],
    "output_modalities": ["text"],
    "quantization": "fp16",
    "context_length": 128000,
    "max_output_length": 4096,
    "pricing": {"prompt": "0.001", "completion": "0.002"},
    "supported_sampling_parameters": ["temperature"],
    "supported_features": ["tools"],
}


@pytest.fixture
def model_payload() -> dict:
    """A Model object as it appears on the wire, with no optional keys."""
    return copy.deepcopy(MODEL_PAYLOAD)


@pytest.fixture
def catalog_payload(model_payload: dict) -> dict:
    """A list-models document holding a single model."""
    return {"data": [model_payload]}


@pytest.fixture
def minimal_model() -> Model:
    """Model with every optional field unset."""
    return Model(
        id="org/model",
        name="Model",
        created=1700000000,
        input_modalities=[InputModality.TEXT, InputModality.IMAGE],
        output_modalities=[OutputModality.TEXT],
        quantization=Quantization.FP16,
        context_length=128000,
        max_output_length=4096,
        pricing=Pricing.new("0.001", "0.002"),
        supported_sampling_parameters=[SamplingParameter.TEMPERATURE],
        supported_features=[Feature.TOOLS],
    )


@pytest.fixture
def full_model() -> Model:
    """Model with every optional field set, at both Model and Pricing level."""
    return Model(
        id="anthropic/claude-sonnet-4",
        name="Claude Sonnet 4",
        created=1747699200,
        input_modalities=list(InputModality),
        output_modalities=list(OutputModality),
        quantization=Quantization.BF16,
        context_length=200000,
        max_output_length=64000,
        pricing=Pricing(
            prompt="0.000003",
            completion="0.000015",
            image="0.0048",
            request="0",
            input_cache_read="0.0000003",
            input_cache_write="0.00000375",
        ),
        supported_sampling_parameters=list(SamplingParameter),
        supported_features=list(Feature),
        openrouter=OpenRouterInfo(slug="anthropic/claude-sonnet-4"),
        hugging_face_id="anthropic/claude-sonnet-4",
        description="Hybrid reasoning model",
        datacenters=[Datacenter.new("US"), Datacenter.new("DE")],
    )


@pytest.fixture
def catalog(minimal_model: Model, full_model: Model) -> ModelCatalogResponse:
    return ModelCatalogResponse(data=[minimal_model, full_model])
