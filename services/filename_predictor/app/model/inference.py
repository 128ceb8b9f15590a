"""
Role and format inference for the positions of a pattern group.
"""

import re
from collections.abc import Mapping, Sequence

from services.filename_predictor.app.config import Settings, get_settings
from services.filename_predictor.app.tokenizer.classifier import format_digits
from services.filename_predictor.app.tokenizer.models import RoleTag, TypeTag

ZERO_PAD_FORMAT = re.compile(r"%0(\d+)d")
COMPACT_DATE = re.compile(r"\d{8}")
DASHED_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

COMPACT_DATE_FORMAT = "yyyyMMdd"
DASHED_DATE_FORMAT = "yyyy-MM-dd"


def zero_pad_format(width: int) -> str:
    """Format string that zero-pads integers to a fixed width."""
    return f"%0{width}d"


def render_number(value: int, fmt: str | None) -> str:
    """
    Render an integer with a position's inferred format.

    Args:
        value: Integer to render (any size)
        fmt: Zero-pad format such as ``%03d``, or None for natural digits

    Returns:
        Rendered string
    """
    digits = format_digits(value)
    match = ZERO_PAD_FORMAT.fullmatch(fmt) if fmt else None
    if match:
        return digits.zfill(int(match.group(1)))
    return digits


class RoleInferencer:
    """Derives the semantic role of a position from its statistics."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def infer(
        self,
        type_tag: TypeTag,
        distinct_values: Mapping[str, int],
        numeric_values: Sequence[int],
    ) -> RoleTag:
        """
        Infer the role of a position. The first matching rule wins.

        Args:
            type_tag: Dominant type at the position
            distinct_values: Frequency of every observed value
            numeric_values: Parsed integers, only for numeric positions

        Returns:
            Role of the position
        """
        if type_tag in (TypeTag.EXT, TypeTag.SEP):
            return RoleTag.CONSTANT

        if type_tag is TypeTag.DATE:
            return RoleTag.DATE

        if len(distinct_values) == 1:
            return RoleTag.CONSTANT

        if type_tag is TypeTag.NUMERIC and len(numeric_values) >= 2:
            if self.density(numeric_values) > self.settings.index_density_threshold:
                return RoleTag.INDEX
            return RoleTag.UNKNOWN

        return RoleTag.UNKNOWN

    @staticmethod
    def density(numeric_values: Sequence[int]) -> float:
        """Observed count divided by the inclusive range the values span."""
        span = max(numeric_values) - min(numeric_values) + 1
        return len(numeric_values) / span


class FormatInferencer:
    """Derives a rendering hint for a position from its raw values."""

    def infer(self, type_tag: TypeTag, values: Sequence[str]) -> str | None:
        """
        Infer the format of a position.

        Args:
            type_tag: Dominant type at the position
            values: Raw values of every contributing component

        Returns:
            Format string, or None when values render naturally
        """
        if not values:
            return None

        if type_tag is TypeTag.NUMERIC:
            width = len(values[0])
            if width > 1 and all(len(v) == width for v in values):
                return zero_pad_format(width)
            return None

        if type_tag is TypeTag.DATE:
            sample = values[0]
            if COMPACT_DATE.fullmatch(sample):
                return COMPACT_DATE_FORMAT
            if DASHED_DATE.fullmatch(sample):
                return DASHED_DATE_FORMAT

        return None
