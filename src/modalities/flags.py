"""Modality flag definitions using bitmasks.

This module defines the vocabulary for data types in a multimodal system.
Multiple modalities can be tracked simultaneously using bitwise OR operations.

Rules:
- Bits are assigned consecutively from bit 0, in declaration order
- Names are lowercase and matched exactly
- The vocabulary is closed; nothing here is registered at runtime
"""

# Base flag: no modality present
MODALITY_NONE = 0

MODALITY_AUDIO = 1 << 0  # Speech, music, any waveform
MODALITY_IMAGE = 1 << 1  # Still images
MODALITY_TEXT = 1 << 2   # Plain or structured text
MODALITY_VIDEO = 1 << 3  # Moving images, with or without audio track
MODALITY_OTHER = 1 << 4  # Anything not covered above

MODALITY_ALL = (
    MODALITY_AUDIO
    | MODALITY_IMAGE
    | MODALITY_TEXT
    | MODALITY_VIDEO
    | MODALITY_OTHER
)

# Declaration order drives name rendering
FLAG_NAMES: tuple[tuple[str, int], ...] = (
    ("audio", MODALITY_AUDIO),
    ("image", MODALITY_IMAGE),
    ("text", MODALITY_TEXT),
    ("video", MODALITY_VIDEO),
    ("other", MODALITY_OTHER),
)

NAME_TO_BIT: dict[str, int] = dict(FLAG_NAMES)
