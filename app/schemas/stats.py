"""Pydantic models for the learner statistics endpoint."""
from __future__ import annotations

from app.schemas.common import CamelModel


class StatsOverview(CamelModel):
    total_mastered: int = 0
    total_learning: int = 0
    total_studied: int = 0
    mastery_rate: str = "0"


class SourceProgress(CamelModel):
    """Progress of one source; rates are one-decimal percentage strings."""

    mastered: int = 0
    learning: int = 0
    total: int = 0
    mastery_rate: str = "0"
    progress: str = "0"
    completion_rate: str = "0"


class SourceProgressBreakdown(CamelModel):
    oxford: SourceProgress
    topics: SourceProgress


class SourceTerms(CamelModel):
    mastered: int
    learning: int
    total: int
    mastered_words: list[str]
    learning_words: list[str]


class StatsTotals(CamelModel):
    mastered: int = 0
    learning: int = 0
    total: int = 0


class RawStats(CamelModel):
    total: StatsTotals
    by_source: dict[str, SourceTerms]


class StatsData(CamelModel):
    overview: StatsOverview
    by_source: SourceProgressBreakdown
    raw_stats: RawStats | None = None


class StatsResponse(CamelModel):
    success: bool = True
    data: StatsData
    error: str | None = None
