"""Modality flags for multimodal data.

This package defines a small closed vocabulary of data types (audio, image,
text, video, other), the ModalitySet value type that combines them, and
helpers for DataFrame columns that store them as bitmasks.

Modules:
- flags: Raw integer bit constants and the ordered name vocabulary
- modality_set: ModalitySet, set algebra and name conversion
- config: DisplayConfig for text rendering
- validate: Validation helpers for bitmask columns
- frame: pandas helpers built on the above
"""

from modalities.config import DEFAULT_DISPLAY, DisplayConfig
from modalities.flags import (
    FLAG_NAMES,
    MODALITY_ALL,
    MODALITY_AUDIO,
    MODALITY_IMAGE,
    MODALITY_NONE,
    MODALITY_OTHER,
    MODALITY_TEXT,
    MODALITY_VIDEO,
)
from modalities.modality_set import (
    InvalidNameError,
    ModalitySet,
    contains,
    display,
    from_names,
    intersect,
    parse_display,
    to_names,
    union,
)

__all__ = [
    # Flags
    "MODALITY_NONE",
    "MODALITY_AUDIO",
    "MODALITY_IMAGE",
    "MODALITY_TEXT",
    "MODALITY_VIDEO",
    "MODALITY_OTHER",
    "MODALITY_ALL",
    "FLAG_NAMES",
    # Value type
    "ModalitySet",
    "InvalidNameError",
    "union",
    "intersect",
    "contains",
    "to_names",
    "from_names",
    "display",
    "parse_display",
    # Config
    "DisplayConfig",
    "DEFAULT_DISPLAY",
]
