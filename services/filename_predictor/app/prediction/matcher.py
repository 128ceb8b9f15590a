"""Scoring of parsed filenames against pattern groups."""

import logging
from dataclasses import dataclass

from services.filename_predictor.app.model.models import Model, PatternGroup
from services.filename_predictor.app.tokenizer.models import ParsedName, RoleTag, TypeTag

logger = logging.getLogger(__name__)

# Score adjustments
MISSING_PENALTY = 2
TYPE_MATCH_BONUS = 2
SEPARATOR_MATCH_BONUS = 2
CONSTANT_MATCH_BONUS = 1


@dataclass(frozen=True)
class MatchResult:
    """Best group for a query and its score."""

    group: PatternGroup
    score: int

    @property
    def is_confident(self) -> bool:
        """A negative score means the query does not really fit any group."""
        return self.score >= 0


class PatternMatcher:
    """Finds the pattern group that best fits a parsed filename."""

    def score(self, query: ParsedName, group: PatternGroup) -> int:
        """
        Score how well a parsed filename fits a group. Higher is better.

        Args:
            query: Parsed filename
            group: Candidate group

        Returns:
            Integer score, negative when the shapes clearly differ
        """
        stats_by_position = {s.position: s for s in group.position_stats}
        length = max(query.component_count, len(group.position_stats))
        total = 0

        for i in range(length):
            component = query.component_at(i)
            stats = stats_by_position.get(i)
            if component is None or stats is None:
                total -= MISSING_PENALTY
                continue

            if component.type is stats.type:
                total += TYPE_MATCH_BONUS
            if (
                component.type is TypeTag.SEP
                and stats.type is TypeTag.SEP
                and component.value == stats.most_common_value()
            ):
                total += SEPARATOR_MATCH_BONUS
            if stats.role is RoleTag.CONSTANT and component.value == stats.sole_value:
                total += CONSTANT_MATCH_BONUS

        return total

    def best_match(self, query: ParsedName, model: Model) -> MatchResult | None:
        """
        Select the best-scoring group of a model.

        Ties go to the group that sorts first by canonical signature.

        Args:
            query: Parsed filename
            model: Model to search

        Returns:
            MatchResult, or None when the model has no groups
        """
        best: MatchResult | None = None
        for group in model.groups:
            score = self.score(query, group)
            if best is None or score > best.score:
                best = MatchResult(group=group, score=score)

        if best is not None:
            logger.debug(
                f"Best match for {query.original!r}: {best.group.signature.canonical} (score={best.score})"
            )
        return best
