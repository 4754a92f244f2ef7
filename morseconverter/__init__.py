from .codec import (
    Codec,
    ConversionHistory,
    ConversionMode,
    ConversionOrchestrator,
    ConversionRecord,
    ConversionResult,
    SwapResult,
    decode,
    encode,
)
from .core.metadata import APP_NAME, APP_VERSION

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "Codec",
    "ConversionHistory",
    "ConversionMode",
    "ConversionOrchestrator",
    "ConversionRecord",
    "ConversionResult",
    "SwapResult",
    "decode",
    "encode",
]
