"""ModalitySet value type.

A ModalitySet is an immutable wrapper around a bitmask of modality flags
(see modalities.flags). Sets combine with | and &, test containment with
``in``, and convert to and from lists of lowercase names.

Key rules:
- The underlying int never has bits outside MODALITY_ALL
- Every operation returns a new value; nothing mutates in place
- Names always come back in declaration order, whatever order built the set

Example:
    combo = ModalitySet.AUDIO | ModalitySet.TEXT
    assert ModalitySet.AUDIO in combo
    assert ModalitySet.IMAGE not in combo
    assert combo.names() == ["audio", "text"]
    assert str(combo) == "audio | text"
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import ClassVar, Iterable

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
    NAME_TO_BIT,
)

logger = logging.getLogger(__name__)


class InvalidNameError(ValueError):
    """Raised when a name does not match any modality flag.

    Attributes:
        name: The offending input, exactly as given
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid modality name: {name!r}")


@dataclass(frozen=True, repr=False)
class ModalitySet:
    """A set of modality flags stored as a bitmask.

    Attributes:
        bits: Underlying integer, a subset of MODALITY_ALL
    """

    bits: int = MODALITY_NONE

    NONE: ClassVar[ModalitySet]
    AUDIO: ClassVar[ModalitySet]
    IMAGE: ClassVar[ModalitySet]
    TEXT: ClassVar[ModalitySet]
    VIDEO: ClassVar[ModalitySet]
    OTHER: ClassVar[ModalitySet]
    ALL: ClassVar[ModalitySet]

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool):
            raise TypeError(f"bits must be an int, got {self.bits!r}")
        try:
            bits = operator.index(self.bits)
        except TypeError:
            raise TypeError(
                f"bits must be an int, got {type(self.bits).__name__}"
            ) from None
        if bits < 0 or bits & ~MODALITY_ALL:
            raise ValueError(
                f"bits {bits} outside defined modalities (must be a subset of {MODALITY_ALL})"
            )
        # Normalise numpy integers and friends to a plain int
        object.__setattr__(self, "bits", bits)

    def __or__(self, other: object) -> ModalitySet:
        if not isinstance(other, ModalitySet):
            return NotImplemented
        return union(self, other)

    def __and__(self, other: object) -> ModalitySet:
        if not isinstance(other, ModalitySet):
            return NotImplemented
        return intersect(self, other)

    def __contains__(self, query: object) -> bool:
        if not isinstance(query, ModalitySet):
            return False
        return contains(self, query)

    def __bool__(self) -> bool:
        return self.bits != MODALITY_NONE

    def __str__(self) -> str:
        return display(self)

    def __repr__(self) -> str:
        return f"ModalitySet({display(self)})"

    def union(self, other: ModalitySet) -> ModalitySet:
        return union(self, other)

    def intersect(self, other: ModalitySet) -> ModalitySet:
        return intersect(self, other)

    def contains(self, query: ModalitySet) -> bool:
        return contains(self, query)

    def names(self) -> list[str]:
        return to_names(self)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> ModalitySet:
        return from_names(names)


ModalitySet.NONE = ModalitySet(MODALITY_NONE)
ModalitySet.AUDIO = ModalitySet(MODALITY_AUDIO)
ModalitySet.IMAGE = ModalitySet(MODALITY_IMAGE)
ModalitySet.TEXT = ModalitySet(MODALITY_TEXT)
ModalitySet.VIDEO = ModalitySet(MODALITY_VIDEO)
ModalitySet.OTHER = ModalitySet(MODALITY_OTHER)
ModalitySet.ALL = ModalitySet(MODALITY_ALL)


def union(a: ModalitySet, b: ModalitySet) -> ModalitySet:
    """Return the set of flags present in either operand."""
    return ModalitySet(a.bits | b.bits)


def intersect(a: ModalitySet, b: ModalitySet) -> ModalitySet:
    """Return the set of flags present in both operands."""
    return ModalitySet(a.bits & b.bits)


def contains(modalities: ModalitySet, query: ModalitySet) -> bool:
    """Return True if every flag in ``query`` is also in ``modalities``.

    This is a subset test, not an overlap test: a multi-flag query needs all
    of its flags present. Querying with NONE is vacuously True for any set,
    so it says nothing useful about containment.
    """
    return (modalities.bits & query.bits) == query.bits


def to_names(modalities: ModalitySet) -> list[str]:
    """Return lowercase flag names in declaration order.

    The result is empty only for NONE.
    """
    return [name for name, bit in FLAG_NAMES if modalities.bits & bit]


def from_names(names: Iterable[str]) -> ModalitySet:
    """Build a set from flag names.

    Matching is exact and case-sensitive. Duplicates are harmless and an
    empty input gives NONE.

    Args:
        names: Iterable of flag names (e.g., ["audio", "text"])

    Raises:
        InvalidNameError: On the first name that is not a known flag
        TypeError: If ``names`` is a single string rather than a sequence
    """
    if isinstance(names, str):
        raise TypeError(f"names must be a sequence of strings, not a string: {names!r}")

    bits = MODALITY_NONE
    for name in names:
        bit = NAME_TO_BIT.get(name) if isinstance(name, str) else None
        if bit is None:
            logger.debug("Rejecting modality name %r", name)
            raise InvalidNameError(name)
        bits |= bit
    return ModalitySet(bits)


def display(modalities: ModalitySet, config: DisplayConfig | None = None) -> str:
    """Render a set for logs and debugging. Never returns an empty string."""
    config = config or DEFAULT_DISPLAY
    names = to_names(modalities)
    if not names:
        return config.none_literal
    return config.separator.join(names)


def parse_display(text: str, config: DisplayConfig | None = None) -> ModalitySet:
    """Parse the output of display() back into a set.

    Raises:
        InvalidNameError: If any segment is not a known flag name
    """
    config = config or DEFAULT_DISPLAY
    stripped = text.strip()
    if stripped == config.none_literal.strip():
        return ModalitySet.NONE
    return from_names(config.split(stripped))
