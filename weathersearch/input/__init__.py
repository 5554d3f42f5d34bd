"""Input-layer public API for key decoding and modal handlers.

Exports are split between low-level terminal decoding (`read_key`) and the
phase/mode handlers used by the runtime loop.
"""

from .key_insert import InsertKeyHandler, build_insert_key_table
from .key_normal import NormalKeyHandler, build_normal_key_table
from .key_registry import KeyBinding, KeyTable
from .key_result import handle_result_key
from .keys import ModalKeyRouter
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyTable",
    "InsertKeyHandler",
    "NormalKeyHandler",
    "ModalKeyRouter",
    "build_insert_key_table",
    "build_normal_key_table",
    "handle_result_key",
]
