"""Ranked and ordered candidate values for a position."""

from services.filename_predictor.app.config import Settings, get_settings
from services.filename_predictor.app.model.inference import render_number
from services.filename_predictor.app.model.models import PositionStats
from services.filename_predictor.app.tokenizer.classifier import is_digits, parse_digits
from services.filename_predictor.app.tokenizer.models import RoleTag

from .models import Suggestion, SuggestionMode, SuggestionReason


class SuggestionGenerator:
    """Generate suggestions for one position in scored or plain mode.

    Both modes share the same ranking. Scored mode annotates every value
    with a score and reason; plain mode orders values for a picker around
    the value currently in place.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def generate(
        self,
        stats: PositionStats | None,
        current_value: str | None = None,
        mode: SuggestionMode = SuggestionMode.SCORED,
    ) -> list[Suggestion]:
        """
        Generate suggestions for a position.

        Args:
            stats: Statistics of the position, None when the group lacks it
            current_value: Value currently at the position, if any
            mode: Scored or plain-with-current output

        Returns:
            Suggestions, best first
        """
        if stats is None or not stats.distinct_values:
            return self._fallback(current_value)

        if self.is_index(stats):
            if mode is SuggestionMode.SCORED:
                return self._scored_index(stats)
            return self._plain_index(stats, current_value)

        if mode is SuggestionMode.SCORED:
            return self._scored_values(stats)
        return self._plain_values(stats, current_value)

    def values(
        self,
        stats: PositionStats | None,
        current_value: str | None = None,
        mode: SuggestionMode = SuggestionMode.PLAIN,
    ) -> list[str]:
        """Same as generate, returning only the suggested strings."""
        return [s.value for s in self.generate(stats, current_value, mode)]

    @staticmethod
    def is_index(stats: PositionStats) -> bool:
        """True for sequential index positions with at least one observed integer."""
        return stats.role is RoleTag.INDEX and bool(stats.numeric_values)

    @staticmethod
    def next_index(stats: PositionStats) -> int:
        """The integer following the largest observed index."""
        return max(stats.numeric_values) + 1

    @staticmethod
    def missing_indices(stats: PositionStats) -> list[int]:
        """Integers strictly between the observed minimum and maximum that were never seen."""
        observed = set(stats.numeric_values)
        return [n for n in range(min(observed) + 1, max(observed)) if n not in observed]

    def _scored_index(self, stats: PositionStats) -> list[Suggestion]:
        suggestions = [
            Suggestion(
                value=render_number(self.next_index(stats), stats.format),
                score=self._round(self.settings.next_index_score),
                reason=SuggestionReason.NEXT_INDEX,
            )
        ]
        for ordinal, gap in enumerate(self.missing_indices(stats)):
            score = max(
                self.settings.gap_min_score,
                self.settings.gap_base_score - self.settings.gap_score_step * ordinal,
            )
            suggestions.append(
                Suggestion(
                    value=render_number(gap, stats.format),
                    score=self._round(score),
                    reason=SuggestionReason.MISSING_INDEX,
                )
            )
        return suggestions

    def _plain_index(self, stats: PositionStats, current_value: str | None) -> list[Suggestion]:
        observed = sorted({render_number(n, stats.format) for n in stats.numeric_values})
        next_value = Suggestion(
            value=render_number(self.next_index(stats), stats.format),
            reason=SuggestionReason.NEXT_INDEX,
        )

        current_number = parse_digits(current_value) if current_value and is_digits(current_value) else None
        if current_value is None or current_number == max(stats.numeric_values):
            return [next_value] + [Suggestion(value=v) for v in observed]

        ordered = [Suggestion(value=current_value, reason=SuggestionReason.CURRENT_VALUE)]
        ordered.extend(Suggestion(value=v) for v in observed if v != current_value)
        if next_value.value != current_value:
            ordered.append(next_value)
        return ordered

    def _scored_values(self, stats: PositionStats) -> list[Suggestion]:
        total = stats.total_observations
        reason = SuggestionReason.CONSTANT if stats.role is RoleTag.CONSTANT else SuggestionReason.FREQUENT_VALUE
        return [
            Suggestion(value=value, score=self._round(count / total), reason=reason)
            for value, count in stats.ranked_values()[: self.settings.max_scored_values]
        ]

    def _plain_values(self, stats: PositionStats, current_value: str | None) -> list[Suggestion]:
        reason = SuggestionReason.CONSTANT if stats.role is RoleTag.CONSTANT else SuggestionReason.FREQUENT_VALUE
        ranked = [Suggestion(value=value, reason=reason) for value, _ in stats.ranked_values()]
        if current_value is None:
            return ranked
        return [Suggestion(value=current_value, reason=SuggestionReason.CURRENT_VALUE)] + [
            s for s in ranked if s.value != current_value
        ]

    @staticmethod
    def _fallback(current_value: str | None) -> list[Suggestion]:
        if current_value is None:
            return []
        return [Suggestion(value=current_value, reason=SuggestionReason.CURRENT_VALUE)]

    def _round(self, score: float) -> float:
        return round(score, self.settings.score_precision)
