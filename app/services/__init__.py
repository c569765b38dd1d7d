"""Service layer package."""

from app.services.evaluation import SentenceEvaluator
from app.services.images import ImageService
from app.services.llm_service import LLMService
from app.services.progress import ProgressService
from app.services.sheet_import import SheetImporter
from app.services.stats import StatsService
from app.services.vocabulary import VocabularyService
from app.services.word_cache import WordCache
from app.services.word_status import WordStatusService

__all__ = [
    "ImageService",
    "LLMService",
    "ProgressService",
    "SentenceEvaluator",
    "SheetImporter",
    "StatsService",
    "VocabularyService",
    "WordCache",
    "WordStatusService",
]
