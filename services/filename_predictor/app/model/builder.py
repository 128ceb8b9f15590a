"""
Model construction: grouping filenames by shape and aggregating per-position statistics.
"""

import logging
import time
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from services.filename_predictor.app.config import Settings, get_settings
from services.filename_predictor.app.tokenizer import Component, ParsedName, Tokenizer, TypeTag
from services.filename_predictor.app.tokenizer.classifier import parse_digits

from .inference import FormatInferencer, RoleInferencer
from .models import Model, PatternGroup, PositionStats

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def dominant_type(components: Sequence[Component]) -> TypeTag:
    """
    Pick the most frequent type among components.

    Ties go to the tag that comes first in TypeTag declaration order.
    """
    counts = Counter(c.type for c in components)
    return min(counts, key=lambda tag: (-counts[tag], tag.priority))


class ModelBuilder:
    """Builds a Model from a collection of filenames."""

    def __init__(self, settings: Settings | None = None, tokenizer: Tokenizer | None = None) -> None:
        """
        Initialize the model builder.

        Args:
            settings: Engine settings, defaults to the cached global settings
            tokenizer: Tokenizer to parse with, created from settings if omitted
        """
        self.settings = settings or get_settings()
        self.tokenizer = tokenizer or Tokenizer(self.settings)
        self.role_inferencer = RoleInferencer(self.settings)
        self.format_inferencer = FormatInferencer()

    def build(self, filenames: Iterable[str]) -> Model:
        """
        Build a model over a filename collection.

        Args:
            filenames: Filenames to analyze

        Returns:
            Model with groups sorted by canonical signature
        """
        start_time = time.time()
        names = list(filenames)

        parsed = self._map(self.tokenizer.parse, names)

        buckets: dict[str, list[ParsedName]] = {}
        for name in parsed:
            buckets.setdefault(name.signature.canonical, []).append(name)

        groups = self._map(self.build_group, [buckets[key] for key in sorted(buckets)])
        model = Model(groups=tuple(groups))

        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(f"Built model from {len(names)} filenames: {len(groups)} groups in {elapsed_ms:.1f}ms")
        for group in groups:
            logger.debug(f"Group {group.signature.canonical} holds {group.file_count} files")

        return model

    def build_group(self, files: Sequence[ParsedName]) -> PatternGroup:
        """
        Build one pattern group from files sharing a signature.

        Args:
            files: Parsed filenames, in input order

        Returns:
            PatternGroup with statistics for every populated position
        """
        max_len = max(f.component_count for f in files)
        stats = []
        for position in range(max_len):
            components = [c for c in (f.component_at(position) for f in files) if c is not None]
            if components:
                stats.append(self.build_position_stats(position, components))

        return PatternGroup(
            signature=files[0].signature,
            files=tuple(files),
            position_stats=tuple(stats),
        )

    def build_position_stats(self, position: int, components: Sequence[Component]) -> PositionStats:
        """
        Compute statistics for one position.

        Args:
            position: Raw component position
            components: Components found at that position

        Returns:
            PositionStats with role and format filled in
        """
        type_tag = dominant_type(components)
        values = [c.value for c in components]
        distinct_values = dict(Counter(values))

        numeric_values: tuple[int, ...] = ()
        if type_tag is TypeTag.NUMERIC:
            numeric_values = tuple(parse_digits(c.value) for c in components if c.type is TypeTag.NUMERIC)

        return PositionStats(
            position=position,
            type=type_tag,
            distinct_values=distinct_values,
            numeric_values=numeric_values,
            role=self.role_inferencer.infer(type_tag, distinct_values, numeric_values),
            format=self.format_inferencer.infer(type_tag, values),
        )

    def _map(self, func: Callable[[T], R], items: Sequence[T]) -> list[R]:
        """Apply func to items, on worker threads when configured; order is preserved."""
        workers = self.settings.build_workers
        if workers <= 1 or len(items) <= 1:
            return [func(item) for item in items]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(func, items))
