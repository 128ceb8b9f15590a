"""Filename reconstruction from new component values."""

from collections.abc import Sequence
from dataclasses import dataclass

from services.filename_predictor.app.exceptions import ArgumentCountError
from services.filename_predictor.app.tokenizer.models import ParsedName, TypeTag


@dataclass(frozen=True)
class NameLayout:
    """Everything of a parsed filename except its editable values.

    ``prefix`` holds separators before the first visible component,
    ``separators[i]`` the run of separators following visible component
    ``i`` (possibly empty) and ``extension`` the dot plus extension.
    """

    original: str
    prefix: str
    values: tuple[str, ...]
    separators: tuple[str, ...]
    extension: str

    @classmethod
    def from_parsed(cls, parsed: ParsedName) -> "NameLayout":
        """Capture the layout of a parsed filename."""
        components = list(parsed.components)
        extension = ""
        if parsed.extension is not None:
            dot, ext = components[-2:]
            extension = dot.value + ext.value
            components = components[:-2]

        prefix: list[str] = []
        values: list[str] = []
        separators: list[list[str]] = []
        for component in components:
            if component.type is TypeTag.SEP:
                (separators[-1] if values else prefix).append(component.value)
            else:
                values.append(component.value)
                separators.append([])

        return cls(
            original=parsed.original,
            prefix="".join(prefix),
            values=tuple(values),
            separators=tuple("".join(run) for run in separators),
            extension=extension,
        )

    @property
    def element_count(self) -> int:
        """Number of editable values."""
        return len(self.values)

    def reconstruct(self, new_values: Sequence[str]) -> str:
        """
        Rebuild a filename, keeping separators and extension.

        Args:
            new_values: One value per visible component, in order

        Returns:
            Reconstructed filename

        Raises:
            ArgumentCountError: If the value count differs from the visible component count
        """
        if len(new_values) != len(self.values):
            raise ArgumentCountError(expected=len(self.values), actual=len(new_values))

        parts = [self.prefix]
        for value, separator in zip(new_values, self.separators, strict=True):
            parts.append(value)
            parts.append(separator)
        parts.append(self.extension)
        return "".join(parts)


def reconstruct(original: ParsedName | NameLayout, new_values: Sequence[str]) -> str:
    """
    Rebuild a filename from a previously parsed name and new values.

    Args:
        original: Parsed filename or its captured layout
        new_values: One value per visible component

    Returns:
        Reconstructed filename
    """
    layout = original if isinstance(original, NameLayout) else NameLayout.from_parsed(original)
    return layout.reconstruct(new_values)
