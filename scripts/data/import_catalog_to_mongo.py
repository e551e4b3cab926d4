"""
Import the JSON question bank into MongoDB.

This script:
1. Reads and validates data/question_bank.json (or --path)
2. Upserts one document per topic into oop_trainer.topics, keyed by name
3. Stores the bank order in a `position` field

Usage:
    python -m scripts.data.import_catalog_to_mongo [--path FILE] [--dry-run] [--drop]
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional

import pandas as pd
from dotenv import load_dotenv
from pymongo import MongoClient

from core.catalog_repo import COLLECTION_NAME, DB_NAME, load_catalog_file
from core.catalog_schemas import TopicRecord

# Load environment
load_dotenv()


def topic_to_document(topic: TopicRecord, position: int) -> dict:
    """Serialize a validated topic for MongoDB."""
    document = topic.model_dump(mode="json")
    document["position"] = position
    return document


def describe_topics(topics: list[TopicRecord]) -> pd.DataFrame:
    rows = [
        {
            "position": position,
            "name": topic.name,
            "title": topic.title,
            "questions": len(topic.questions),
        }
        for position, topic in enumerate(topics)
    ]
    return pd.DataFrame(rows, columns=["position", "name", "title", "questions"])


def import_catalog(
    path: Optional[Path] = None,
    dry_run: bool = False,
    drop: bool = False
) -> None:
    """
    Import the question bank into MongoDB.

    Args:
        path: Bank file to import (None = configured bank)
        dry_run: If True, validate and report without writing
        drop: If True, remove every existing topic document first
    """
    catalog = load_catalog_file(path)
    print(f"✓ Validated question bank ({len(catalog.topics)} topics)\n")
    print(describe_topics(catalog.topics).to_string(index=False))
    print()

    if dry_run:
        print("⚠ DRY RUN MODE - No changes were made to MongoDB")
        return

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    print("Connecting to MongoDB...")
    client = MongoClient(mongo_uri)
    collection = client[DB_NAME][COLLECTION_NAME]

    # Verify connection
    client.admin.command("ping")
    print(f"✓ Connected to MongoDB: {DB_NAME}.{COLLECTION_NAME}\n")

    collection.create_index([("name", 1)], unique=True)
    collection.create_index([("position", 1)])

    if drop:
        result = collection.delete_many({})
        print(f"Dropped {result.deleted_count} existing topic documents")

    inserted = 0
    updated = 0
    for position, topic in enumerate(catalog.topics):
        result = collection.replace_one(
            {"name": topic.name},
            topic_to_document(topic, position),
            upsert=True
        )
        if result.upserted_id is not None:
            inserted += 1
            print(f"  ✓ Inserted {topic.name} ({len(topic.questions)} questions)")
        else:
            updated += 1
            print(f"  ✓ Updated {topic.name} ({len(topic.questions)} questions)")

    print(f"\n{'='*60}")
    print("Import complete!")
    print(f"{'='*60}")
    print(f"Inserted: {inserted}")
    print(f"Updated:  {updated}")


def main():
    parser = argparse.ArgumentParser(description="Import the question bank to MongoDB")
    parser.add_argument(
        "--path",
        type=Path,
        help="Question bank JSON file (default: CATALOG_PATH or data/question_bank.json)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the bank without writing to MongoDB"
    )
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Delete existing topic documents before importing"
    )

    args = parser.parse_args()

    import_catalog(path=args.path, dry_run=args.dry_run, drop=args.drop)


if __name__ == "__main__":
    main()
