"""Aggregate learner statistics from the stored word strings."""
from __future__ import annotations

from sqlalchemy.orm import Session

from app.config import settings
from app.core.word_strings import split_terms
from app.schemas.stats import (
    RawStats,
    SourceProgress,
    SourceProgressBreakdown,
    SourceTerms,
    StatsData,
    StatsOverview,
    StatsTotals,
)
from app.services.progress import format_rate
from app.services.word_status import WordStatusService


def empty_stats() -> StatsData:
    """Zeroed statistics returned alongside a failure."""

    return StatsData(
        overview=StatsOverview(),
        by_source=SourceProgressBreakdown(
            oxford=SourceProgress(progress=f"0/{settings.OXFORD_TARGET_WORDS}"),
            topics=SourceProgress(completion_rate="N/A"),
        ),
    )


class StatsService:
    """Compute mastered/learning counts per source and overall."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def raw_stats(self, *, user_id: str) -> RawStats:
        totals = StatsTotals()
        by_source: dict[str, SourceTerms] = {}
        for row in WordStatusService(self.db).list_strings(user_id=user_id):
            mastered = split_terms(row.mastered_words)
            learning = split_terms(row.learning_words)
            by_source[row.source or "unknown"] = SourceTerms(
                mastered=len(mastered),
                learning=len(learning),
                total=len(mastered) + len(learning),
                mastered_words=mastered,
                learning_words=learning,
            )
            totals.mastered += len(mastered)
            totals.learning += len(learning)
            totals.total += len(mastered) + len(learning)
        return RawStats(total=totals, by_source=by_source)

    def compute(self, *, user_id: str) -> StatsData:
        raw = self.raw_stats(user_id=user_id)
        oxford = raw.by_source.get("oxford")
        topics = raw.by_source.get("topics")
        oxford_mastered = oxford.mastered if oxford else 0
        topics_mastered = topics.mastered if topics else 0
        target = settings.OXFORD_TARGET_WORDS

        return StatsData(
            overview=StatsOverview(
                total_mastered=raw.total.mastered,
                total_learning=raw.total.learning,
                total_studied=raw.total.total,
                mastery_rate=format_rate(raw.total.mastered, raw.total.total),
            ),
            by_source=SourceProgressBreakdown(
                oxford=SourceProgress(
                    mastered=oxford_mastered,
                    learning=oxford.learning if oxford else 0,
                    total=oxford.total if oxford else 0,
                    mastery_rate=format_rate(oxford_mastered, oxford.total if oxford else 0),
                    progress=f"{oxford_mastered}/{target}",
                    completion_rate=f"{oxford_mastered / target * 100:.1f}",
                ),
                topics=SourceProgress(
                    mastered=topics_mastered,
                    learning=topics.learning if topics else 0,
                    total=topics.total if topics else 0,
                    mastery_rate=format_rate(topics_mastered, topics.total if topics else 0),
                    progress=str(topics_mastered),
                    # Curated topics have no fixed size.
                    completion_rate="N/A",
                ),
            ),
            raw_stats=raw,
        )


__all__ = ["StatsService", "empty_stats"]
