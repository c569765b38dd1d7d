"""Time-bounded cache of the Oxford word list and per-topic statistics.

Entries are kept in memory and mirrored to the shared cache backend together
with their fetch timestamp. Anything older than the TTL is refetched on the
next read; nothing is refreshed in the background.
"""
from __future__ import annotations

import threading
import time
from collections import Counter
from typing import Any, Callable, Iterable, Optional

from loguru import logger
from pydantic import ValidationError

from app.config import settings
from app.core.topics import TOPICS_METADATA, get_level_from_word, get_topic_from_word
from app.schemas.topic import TopicStatRead
from app.schemas.vocabulary import WordRead
from app.utils.cache import CacheBackend, cache_backend

CACHE_NAMESPACE = "word_cache"
OXFORD_WORDS_KEY = "oxford_words"
TOPIC_STATS_KEY = "topic_stats"

WordFetcher = Callable[[], Iterable[Any]]


def augment_word(raw: Any) -> WordRead:
    """Validate a raw word and fill in its derived topic and level."""

    word = WordRead.model_validate(raw)
    return word.model_copy(
        update={
            "topic": word.topic or get_topic_from_word(word),
            "level": get_level_from_word(word),
        }
    )


def compute_topic_stats(words: Iterable[WordRead]) -> list[TopicStatRead]:
    """Count words per predefined topic, in the fixed topic order."""

    counts = Counter(word.topic for word in words)
    return [
        TopicStatRead(
            name=topic.name,
            icon=topic.icon,
            description=topic.description,
            word_count=counts.get(topic.name, 0),
        )
        for topic in TOPICS_METADATA
    ]


class WordCache:
    """Cache the word list and topic statistics for ``ttl`` seconds."""

    def __init__(
        self,
        fetch_words: WordFetcher,
        *,
        backend: Optional[CacheBackend] = None,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetch_words = fetch_words
        self._backend = backend or cache_backend
        self.ttl = settings.WORD_CACHE_TTL_SECONDS if ttl is None else ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._closed = False
        self._oxford_loading = False
        self._reset_memory()

    def _reset_memory(self) -> None:
        self._words: list[WordRead] = []
        self._words_fetched_at: Optional[float] = None
        self._topic_stats: list[TopicStatRead] = []
        self._stats_fetched_at: Optional[float] = None
        self._topic_slices: dict[str, list[WordRead]] = {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def __enter__(self) -> "WordCache":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Drop in-memory state; the cache cannot be used afterwards."""

        with self._lock:
            self._reset_memory()
            self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("WordCache is closed")

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------
    @property
    def oxford_loaded(self) -> bool:
        return self._words_fetched_at is not None

    @property
    def oxford_loading(self) -> bool:
        return self._oxford_loading

    @property
    def topic_stats_loaded(self) -> bool:
        return self._stats_fetched_at is not None

    def _is_fresh(self, fetched_at: Optional[float]) -> bool:
        return fetched_at is not None and self._clock() - fetched_at < self.ttl

    # ------------------------------------------------------------------
    # Persisted entries
    # ------------------------------------------------------------------
    def _read_entry(self, key: str, model: type) -> Optional[tuple[list[Any], float]]:
        entry = self._backend.get(CACHE_NAMESPACE, key)
        if entry is None:
            return None
        try:
            fetched_at = float(entry["fetchedAt"])
            payload = [model.model_validate(item) for item in entry["payload"]]
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable word cache entry", key=key, error=str(exc))
            return None
        if not self._is_fresh(fetched_at):
            return None
        return payload, fetched_at

    def _write_entry(self, key: str, items: list[Any], fetched_at: float) -> None:
        self._backend.set(
            CACHE_NAMESPACE,
            key,
            {
                "payload": [item.model_dump(mode="json") for item in items],
                "fetchedAt": fetched_at,
            },
            ttl_seconds=max(int(self.ttl), 1),
        )

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------
    def load_all_words(self) -> list[WordRead]:
        """Return every Oxford word with its topic and level filled in.

        While another caller is fetching, the current in-memory list (possibly
        empty) is returned instead of starting a second fetch. A failed fetch
        is logged and yields an empty list.
        """

        words, _ = self._load_words()
        return words

    def _load_words(self) -> tuple[list[WordRead], Optional[float]]:
        """Return the words together with the fetch time they belong to.

        The time is ``None`` when the words are not a fresh, current set: a
        failed fetch, or an older list handed out while another caller fetches.
        """

        with self._lock:
            self._ensure_open()
            if self._is_fresh(self._words_fetched_at):
                return list(self._words), self._words_fetched_at
            if self._oxford_loading:
                return list(self._words), None
            self._oxford_loading = True

        try:
            cached = self._read_entry(OXFORD_WORDS_KEY, WordRead)
            if cached is not None:
                words, fetched_at = cached
                logger.debug("Oxford words restored from cache", count=len(words))
            else:
                fetched_at = self._clock()
                try:
                    words = [augment_word(raw) for raw in self._fetch_words()]
                except Exception:
                    logger.exception("Failed to load Oxford words")
                    return [], None
                self._write_entry(OXFORD_WORDS_KEY, words, fetched_at)
                logger.info("Oxford words fetched", count=len(words))

            with self._lock:
                if not self._closed:
                    self._words = words
                    self._words_fetched_at = fetched_at
                    self._topic_slices = {}
            return list(words), fetched_at
        finally:
            with self._lock:
                self._oxford_loading = False

    def _is_current(self, fetched_at: Optional[float]) -> bool:
        # Caller holds the lock.
        return (
            fetched_at is not None
            and not self._closed
            and self._words_fetched_at == fetched_at
            and self._is_fresh(fetched_at)
        )

    def get_words_by_topic(self, topic_name: str) -> list[WordRead]:
        """Return the cached words belonging to ``topic_name``."""

        with self._lock:
            self._ensure_open()
            if self._is_fresh(self._words_fetched_at) and topic_name in self._topic_slices:
                return list(self._topic_slices[topic_name])

        all_words, words_fetched_at = self._load_words()
        words = [word for word in all_words if word.topic == topic_name]
        with self._lock:
            if self._is_current(words_fetched_at):
                self._topic_slices[topic_name] = words
        return list(words)

    # ------------------------------------------------------------------
    # Topic statistics
    # ------------------------------------------------------------------
    def load_topic_stats(self) -> list[TopicStatRead]:
        """Return the word count of each predefined topic."""

        with self._lock:
            self._ensure_open()
            if self._is_fresh(self._stats_fetched_at):
                return list(self._topic_stats)

        cached = self._read_entry(TOPIC_STATS_KEY, TopicStatRead)
        if cached is not None:
            stats, fetched_at = cached
        else:
            words, words_fetched_at = self._load_words()
            stats = compute_topic_stats(words)
            with self._lock:
                current = self._is_current(words_fetched_at)
            if not current:
                return stats
            # Stats expire together with the words they were counted from.
            fetched_at = words_fetched_at
            self._write_entry(TOPIC_STATS_KEY, stats, fetched_at)
            logger.info("Topic stats computed", words=len(words))

        with self._lock:
            if not self._closed:
                self._topic_stats = stats
                self._stats_fetched_at = fetched_at
        return list(stats)

    # ------------------------------------------------------------------
    # Invalidation
    # ------------------------------------------------------------------
    def clear_cache(self) -> None:
        """Remove persisted entries and all in-memory state."""

        with self._lock:
            self._ensure_open()
            self._reset_memory()
        self._backend.invalidate(CACHE_NAMESPACE, key=OXFORD_WORDS_KEY)
        self._backend.invalidate(CACHE_NAMESPACE, key=TOPIC_STATS_KEY)
        logger.info("Word cache cleared")


__all__ = ["WordCache", "augment_word", "compute_topic_stats"]
