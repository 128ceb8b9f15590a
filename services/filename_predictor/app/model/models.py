"""
Data models for pattern groups and per-position statistics.
"""

from dataclasses import dataclass, field
from typing import Any

from services.filename_predictor.app.tokenizer.classifier import format_digits
from services.filename_predictor.app.tokenizer.models import STRUCTURAL_TYPES, ParsedName, RoleTag, Signature, TypeTag


@dataclass(frozen=True)
class PositionStats:
    """Aggregate over every file of a group that has a component at one position."""

    position: int
    type: TypeTag
    distinct_values: dict[str, int]
    numeric_values: tuple[int, ...] = ()
    role: RoleTag = RoleTag.UNKNOWN
    format: str | None = None

    @property
    def total_observations(self) -> int:
        """Number of files contributing to this position."""
        return sum(self.distinct_values.values())

    @property
    def is_visible(self) -> bool:
        """True unless the position holds separators or the extension."""
        return self.type not in STRUCTURAL_TYPES

    @property
    def sole_value(self) -> str | None:
        """The only observed value, when exactly one was observed."""
        if len(self.distinct_values) == 1:
            return next(iter(self.distinct_values))
        return None

    def ranked_values(self) -> list[tuple[str, int]]:
        """Observed values by descending frequency, ties by ascending value."""
        return sorted(self.distinct_values.items(), key=lambda item: (-item[1], item[0]))

    def most_common_value(self) -> str | None:
        """The highest-ranked observed value."""
        ranked = self.ranked_values()
        return ranked[0][0] if ranked else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "position": self.position,
            "type": self.type.value,
            "distinct_values": dict(self.distinct_values),
            "numeric_values": [format_digits(n) for n in self.numeric_values],
            "role": self.role.value,
            "format": self.format,
        }


@dataclass(frozen=True)
class PatternGroup:
    """Filenames sharing one canonical signature, with derived statistics."""

    signature: Signature
    files: tuple[ParsedName, ...]
    position_stats: tuple[PositionStats, ...]
    _originals: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_originals", frozenset(f.original for f in self.files))

    @property
    def file_count(self) -> int:
        """Get the number of files in the group."""
        return len(self.files)

    @property
    def visible_stats(self) -> list[PositionStats]:
        """Statistics of positions that are neither separators nor the extension."""
        return [s for s in self.position_stats if s.is_visible]

    def stats_at(self, position: int) -> PositionStats | None:
        """Get the statistics of a raw position, if any file reaches it."""
        for stats in self.position_stats:
            if stats.position == position:
                return stats
        return None

    def contains(self, filename: str) -> bool:
        """Check whether the exact filename was part of the group."""
        return filename in self._originals

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "signature": self.signature.canonical,
            "files": [f.original for f in self.files],
            "position_stats": [s.to_dict() for s in self.position_stats],
        }


@dataclass(frozen=True)
class Model:
    """All pattern groups of a filename collection, sorted by canonical signature."""

    groups: tuple[PatternGroup, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when the model holds no groups."""
        return not self.groups

    @property
    def file_count(self) -> int:
        """Total number of files across all groups."""
        return sum(g.file_count for g in self.groups)

    def group_for(self, signature: Signature | str) -> PatternGroup | None:
        """
        Look up the group of a signature.

        Args:
            signature: Signature or its canonical string

        Returns:
            The matching group or None
        """
        canonical = signature if isinstance(signature, str) else signature.canonical
        for group in self.groups:
            if group.signature.canonical == canonical:
                return group
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"groups": [g.to_dict() for g in self.groups]}
