from .clipboard_protocol import ClipboardUnavailableError, ClipboardWriter
from .codec import Codec, decode, default_codec, encode
from .history import ConversionHistory
from .models import ConversionMode, ConversionRecord, ConversionResult, SwapResult
from .orchestrator import ConversionOrchestrator
from .symbol_table import (
    DEFAULT_FORWARD_TABLE,
    WORD_SEPARATOR,
    SymbolTable,
    build_symbol_table,
    invert_table,
)

__all__ = [
    "ClipboardUnavailableError",
    "ClipboardWriter",
    "Codec",
    "ConversionHistory",
    "ConversionMode",
    "ConversionOrchestrator",
    "ConversionRecord",
    "ConversionResult",
    "DEFAULT_FORWARD_TABLE",
    "SwapResult",
    "SymbolTable",
    "WORD_SEPARATOR",
    "build_symbol_table",
    "decode",
    "default_codec",
    "encode",
    "invert_table",
]
