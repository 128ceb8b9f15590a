"""
Data models for the tokenizer module.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeTag(Enum):
    """Primitive type of a filename component.

    Declaration order is the tie-break priority used when picking the
    dominant type of a position.
    """

    ALPHA = "alpha"
    NUMERIC = "numeric"
    DATE = "date"
    ALPHANUM = "alphanum"
    SEP = "sep"
    EXT = "ext"

    @property
    def priority(self) -> int:
        """Position of the tag in the tie-break order (lower wins)."""
        return _TYPE_PRIORITY[self]


_TYPE_PRIORITY = {tag: index for index, tag in enumerate(TypeTag)}


class RoleTag(Enum):
    """Semantic role of a component or of a position across a group."""

    CONSTANT = "constant"
    INDEX = "index"
    DATE = "date"
    UNKNOWN = "unknown"


STRUCTURAL_TYPES = frozenset({TypeTag.SEP, TypeTag.EXT})


@dataclass(frozen=True)
class Component:
    """A typed, positioned token of a filename."""

    value: str
    type: TypeTag
    role: RoleTag
    position: int

    @property
    def is_visible(self) -> bool:
        """True for components a user edits (not separators or the extension)."""
        return self.type not in STRUCTURAL_TYPES

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "value": self.value,
            "type": self.type.value,
            "role": self.role.value,
            "position": self.position,
        }


@dataclass(frozen=True)
class Signature:
    """Shape of a filename: one tag per component plus their canonical join."""

    elements: tuple[str, ...]
    canonical: str

    def __str__(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class ParsedName:
    """Result of tokenizing a filename."""

    original: str
    components: tuple[Component, ...]
    signature: Signature
    _visible: tuple[Component, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_visible", tuple(c for c in self.components if c.is_visible))

    @property
    def component_count(self) -> int:
        """Get the number of components, separators and extension included."""
        return len(self.components)

    @property
    def visible_components(self) -> tuple[Component, ...]:
        """Components that are neither separators nor the extension."""
        return self._visible

    @property
    def current_values(self) -> list[str]:
        """Values of the visible components, in order."""
        return [c.value for c in self._visible]

    @property
    def extension(self) -> str | None:
        """The detected extension without its leading dot."""
        if self.components and self.components[-1].type is TypeTag.EXT:
            return self.components[-1].value
        return None

    def component_at(self, position: int) -> Component | None:
        """Get the component at a raw position, if the name is that long."""
        if 0 <= position < len(self.components):
            return self.components[position]
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "original": self.original,
            "components": [c.to_dict() for c in self.components],
            "signature": {
                "elements": list(self.signature.elements),
                "canonical": self.signature.canonical,
            },
        }
