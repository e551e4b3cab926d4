"""
Question bank repository.

Loads topic question sets from one of two sources:
- file (default): the JSON bank at data/question_bank.json or CATALOG_PATH
- mongo: one document per topic in MongoDB (MONGO_URI)

The bank is read-only content; nothing here is written back.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection

from core.catalog_schemas import CatalogDocument, TopicRecord
from core.errors import InvalidQuestionError, QuestionLoadError
from core.questions import Question

# Load environment
load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "question_bank.json"
DB_NAME = "oop_trainer"
COLLECTION_NAME = "topics"

# Global connection pool and parsed bank cache
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None
_file_cache: dict[Path, CatalogDocument] = {}


# ---- Source Selection ----

def get_catalog_source() -> str:
    """Return 'file' or 'mongo' from CATALOG_SOURCE."""
    source = os.getenv("CATALOG_SOURCE", "file").strip().lower()
    if source not in ("file", "mongo"):
        raise ValueError(f"CATALOG_SOURCE must be 'file' or 'mongo', got {source!r}")
    return source


def get_catalog_path() -> Path:
    override = os.getenv("CATALOG_PATH")
    return Path(override) if override else DEFAULT_CATALOG_PATH


# ---- File Source ----

def parse_catalog(payload: dict) -> CatalogDocument:
    """
    Validate a decoded bank payload.

    Raises:
        InvalidQuestionError: if any topic or question record is malformed
    """
    try:
        return CatalogDocument.model_validate(payload)
    except ValidationError as exc:
        raise InvalidQuestionError(f"Invalid question bank: {exc}") from exc


def load_catalog_file(path: Optional[Path] = None) -> CatalogDocument:
    """
    Read and validate the JSON bank, caching the result per path.
    """
    path = Path(path) if path else get_catalog_path()
    cached = _file_cache.get(path)
    if cached is not None:
        return cached

    if not path.exists():
        raise FileNotFoundError(f"Question bank not found: {path}")

    with path.open(encoding="utf-8") as handle:
        document = parse_catalog(json.load(handle))

    logger.info("Loaded question bank %s (%d topics)", path, len(document.topics))
    _file_cache[path] = document
    return document


def clear_cache() -> None:
    _file_cache.clear()


# ---- Mongo Source ----

def get_collection() -> Collection:
    """
    Get the MongoDB topic collection, reusing one client per process.
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    _collection = _client[DB_NAME][COLLECTION_NAME]
    return _collection


def _mongo_topics() -> list[TopicRecord]:
    collection = get_collection()
    documents = collection.find({}, {"_id": 0}).sort("position", 1)
    topics = []
    for document in documents:
        document.pop("position", None)
        try:
            topics.append(TopicRecord.model_validate(document))
        except ValidationError as exc:
            raise InvalidQuestionError(f"Invalid topic document {document.get('name')!r}: {exc}") from exc
    return topics


# ---- Query Functions ----

def get_topics(source: Optional[str] = None) -> list[TopicRecord]:
    """
    All topic records from the configured source, in bank order.
    """
    source = source or get_catalog_source()
    if source == "mongo":
        return _mongo_topics()
    return list(load_catalog_file().topics)


def list_topics(source: Optional[str] = None) -> list[tuple[str, str]]:
    """Return (name, title) pairs for the topic menu."""
    return [(topic.name, topic.title) for topic in get_topics(source)]


def find_topic(topic: str, source: Optional[str] = None) -> Optional[TopicRecord]:
    for record in get_topics(source):
        if record.matches(topic):
            return record
    return None


def load_questions(topic: str, source: Optional[str] = None) -> list[Question]:
    """
    Build a fresh question list for a topic.

    Raises:
        QuestionLoadError: unknown topic, or a topic with no questions
        InvalidQuestionError: a record cannot be turned into a question
    """
    record = find_topic(topic, source)
    if record is None:
        raise QuestionLoadError(f"Topic not found: {topic}")

    questions = record.to_questions()
    if not questions:
        raise QuestionLoadError(f"Topic has no questions: {record.name}")

    logger.debug("Loaded %d questions for topic %s", len(questions), record.name)
    return questions
