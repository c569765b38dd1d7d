"""Pydantic schemas package."""

from app.schemas.auth import AuthUserRead
from app.schemas.evaluation import (
    Evaluation,
    EvaluationRequest,
    LegacyEvaluation,
    LegacyEvaluationResponse,
    PracticeRequest,
    PracticeResponse,
    SimpleEvaluationResponse,
)
from app.schemas.image import (
    ImageBatchRequest,
    ImageBatchResponse,
    ImageRequest,
    ImageResponse,
    ImageSearchResponse,
)
from app.schemas.progress import (
    ProgressListData,
    ProgressListResponse,
    ProgressRead,
    ProgressSaveResponse,
    ProgressStats,
    ProgressUpdate,
)
from app.schemas.sheet import SheetImportRequest, SheetImportResponse, VocabPair
from app.schemas.stats import (
    RawStats,
    SourceProgress,
    SourceProgressBreakdown,
    SourceTerms,
    StatsData,
    StatsOverview,
    StatsResponse,
    StatsTotals,
)
from app.schemas.topic import CuratedTopicRead, TopicStatRead, TopicWordRead
from app.schemas.vocabulary import RandomWord, WordCountResponse, WordListResponse, WordRead
from app.schemas.word_status import WordStatusRead, WordStatusStrings, WordStatusUpdate

__all__ = [
    "AuthUserRead",
    "Evaluation",
    "EvaluationRequest",
    "LegacyEvaluation",
    "LegacyEvaluationResponse",
    "PracticeRequest",
    "PracticeResponse",
    "SimpleEvaluationResponse",
    "ImageBatchRequest",
    "ImageBatchResponse",
    "ImageRequest",
    "ImageResponse",
    "ImageSearchResponse",
    "ProgressListData",
    "ProgressListResponse",
    "ProgressRead",
    "ProgressSaveResponse",
    "ProgressStats",
    "ProgressUpdate",
    "SheetImportRequest",
    "SheetImportResponse",
    "VocabPair",
    "RawStats",
    "SourceProgress",
    "SourceProgressBreakdown",
    "SourceTerms",
    "StatsData",
    "StatsOverview",
    "StatsResponse",
    "StatsTotals",
    "CuratedTopicRead",
    "TopicStatRead",
    "TopicWordRead",
    "RandomWord",
    "WordCountResponse",
    "WordListResponse",
    "WordRead",
    "WordStatusRead",
    "WordStatusStrings",
    "WordStatusUpdate",
]
