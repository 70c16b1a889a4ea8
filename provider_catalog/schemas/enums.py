"""
Provider Model Catalog - Enumerations
=====================================
Closed value sets used by the catalog. Each member's value is its wire string.
"""

from enum import Enum


class InputModality(str, Enum):
    """Kinds of input a model accepts."""

    TEXT = "text"
    FILE = "file"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"


class OutputModality(str, Enum):
    """Kinds of output a model produces."""

    TEXT = "text"
    IMAGE = "image"


class Quantization(str, Enum):
    """Numeric precision the model weights are served in."""

    INT4 = "int4"
    INT8 = "int8"
    FP4 = "fp4"
    FP6 = "fp6"
    FP8 = "fp8"
    FP16 = "fp16"
    BF16 = "bf16"
    FP32 = "fp32"


class SamplingParameter(str, Enum):
    """Generation-time controls a model honours."""

    TEMPERATURE = "temperature"
    TOP_P = "top_p"
    TOP_K = "top_k"
    REPETITION_PENALTY = "repetition_penalty"
    FREQUENCY_PENALTY = "frequency_penalty"
    PRESENCE_PENALTY = "presence_penalty"
    STOP = "stop"
    SEED = "seed"


class Feature(str, Enum):
    """Capability flags."""

    TOOLS = "tools"
    JSON_MODE = "json_mode"
    STRUCTURED_OUTPUTS = "structured_outputs"
    WEB_SEARCH = "web_search"
    REASONING = "reasoning"
