"""Seed the Oxford 3000 word list from a CSV file.

Expected columns: term, meaning, pos, example, ipa, topic (only the first two
are required). Words whose term already exists are skipped.
"""
from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

sys.path.append(str(Path(__file__).resolve().parent.parent))

from app.db.models.vocabulary import OxfordWord
from app.db.session import SessionLocal


def load_words_from_csv(csv_path: str, db: Optional[Session] = None) -> int:
    """Load Oxford words from CSV file into the database.

    Terms are compared case-insensitively, both against stored words and
    against earlier rows of the same file.
    """

    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    loaded = 0
    seen: set[str] = set()

    try:
        with open(csv_path, "r", encoding="utf-8", newline="") as file:
            reader = csv.DictReader(file)

            for row in reader:
                term = (row.get("term") or "").strip()
                meaning = (row.get("meaning") or "").strip()
                if not term or not meaning or term.lower() in seen:
                    continue
                seen.add(term.lower())

                existing = (
                    db.query(OxfordWord)
                    .filter(func.lower(OxfordWord.term) == term.lower())
                    .first()
                )
                if existing:
                    continue

                db.add(
                    OxfordWord(
                        term=term,
                        meaning=meaning,
                        part_of_speech=row.get("pos") or None,
                        example=row.get("example") or None,
                        ipa=row.get("ipa") or None,
                        topic=row.get("topic") or None,
                    )
                )
                loaded += 1

                if loaded % 100 == 0:
                    db.commit()
                    print(f"Loaded {loaded} words...")

            db.commit()
            return loaded

    except Exception as exc:  # pragma: no cover - CLI feedback
        db.rollback()
        print(f"Error loading words: {exc}")
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":  # pragma: no cover - CLI execution
    import argparse

    parser = argparse.ArgumentParser(description="Seed the Oxford word list")
    parser.add_argument("csv", type=str, help="Path to CSV file")

    args = parser.parse_args()
    count = load_words_from_csv(args.csv)
    print(f"Successfully loaded {count} words")
