#!filepath: collectkit/core/__init__.py
from .byte_chunker import ByteChunker
from .circular_index import NOT_FOUND, CircularIndex
from .map_utils import MapUtils
from .sequence_utils import SequenceUtils
from .vivify_map import AutoVivifyingOrderedMap

__all__ = [
    "NOT_FOUND",
    "CircularIndex",
    "ByteChunker",
    "AutoVivifyingOrderedMap",
    "SequenceUtils",
    "MapUtils",
]
