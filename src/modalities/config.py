"""Display configuration for modality sets.

DisplayConfig controls how a set is rendered as text and parsed back.
It is validated at construction and can be dumped to / loaded from JSON.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from itertools import combinations
from pathlib import Path
from typing import Any, Iterator

from modalities.flags import FLAG_NAMES, NAME_TO_BIT


@dataclass(frozen=True)
class DisplayConfig:
    """Configuration for rendering a ModalitySet.

    Attributes:
        separator: Text placed between flag names (default " | ")
        none_literal: Rendering of the empty set (default "none")
    """

    separator: str = " | "
    none_literal: str = "none"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration parameters."""
        errors = []

        if not isinstance(self.separator, str) or not self.separator:
            errors.append(f"separator must be a non-empty string, got {self.separator!r}")
        else:
            unsplittable = self._first_unsplittable_join()
            if unsplittable is not None:
                errors.append(
                    f"separator {self.separator!r} does not split back into flag names, "
                    f"e.g. {unsplittable!r}"
                )

        if not isinstance(self.none_literal, str) or not self.none_literal.strip():
            errors.append(
                f"none_literal must be a non-empty string, got {self.none_literal!r}"
            )
        elif self.none_literal.strip() in NAME_TO_BIT:
            errors.append(
                f"none_literal must differ from every flag name, got {self.none_literal!r}"
            )
        elif self._none_literal_collides():
            errors.append(
                f"none_literal {self.none_literal!r} collides with a rendered flag set"
            )

        if errors:
            raise ValueError("DisplayConfig validation failed:\n  - " + "\n  - ".join(errors))

    def _joins(self) -> Iterator[tuple[str, ...]]:
        """Yield every non-empty run of flag names in declaration order."""
        names = [name for name, _ in FLAG_NAMES]
        for size in range(1, len(names) + 1):
            yield from combinations(names, size)

    def _first_unsplittable_join(self) -> str | None:
        for names in self._joins():
            joined = self.separator.join(names)
            if self.split(joined) != list(names):
                return joined
        return None

    def _none_literal_collides(self) -> bool:
        if not isinstance(self.separator, str) or not self.separator:
            return False
        literal = self.none_literal.strip()
        return any(self.separator.join(names).strip() == literal for names in self._joins())

    def split(self, text: str) -> list[str]:
        """Split rendered text on the separator, trimming whitespace around names."""
        token = self.separator.strip() or self.separator
        return [part.strip() for part in text.strip().split(token)]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize config to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path | str) -> Path:
        """Save config to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())
        return path

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DisplayConfig:
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_json(cls, json_str: str) -> DisplayConfig:
        """Create config from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Path | str) -> DisplayConfig:
        """Load config from JSON file."""
        path = Path(path)
        return cls.from_json(path.read_text())


DEFAULT_DISPLAY = DisplayConfig()
