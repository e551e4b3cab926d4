"""
Tests for the question bank repository (file and MongoDB sources).
"""

import json

import pytest

from core import catalog_repo
from core.errors import InvalidQuestionError, QuestionLoadError
from core.questions import FillCodeQuestion, QuestionKind


EXPECTED_TOPICS = ["encapsulation", "inheritance", "interface", "polymorphism", "abstraction"]


@pytest.fixture(autouse=True)
def file_source(monkeypatch):
    monkeypatch.delenv("CATALOG_PATH", raising=False)
    monkeypatch.setenv("CATALOG_SOURCE", "file")
    catalog_repo.clear_cache()
    yield
    catalog_repo.clear_cache()


def small_bank(name="recursion"):
    return {
        "version": 1,
        "topics": [
            {
                "name": name,
                "title": name.capitalize(),
                "questions": [
                    {
                        "kind": "fill_code",
                        "difficulty": 2,
                        "prompt": "Complete the base case.",
                        "template": "if (n == 0) return ______;",
                        "answer": "1",
                        "explanation": "0! is 1.",
                    }
                ],
            }
        ],
    }


# ---- File Source ----

def test_bundled_bank_lists_five_topics_in_order():
    names = [name for name, _ in catalog_repo.list_topics()]
    assert names == EXPECTED_TOPICS


def test_every_bundled_topic_loads():
    for name in EXPECTED_TOPICS:
        questions = catalog_repo.load_questions(name)
        assert questions
        kinds = {q.kind for q in questions}
        assert QuestionKind.MULTIPLE_CHOICE in kinds


def test_topic_lookup_is_trimmed_and_case_insensitive():
    by_name = catalog_repo.load_questions("  InHeRiTaNcE ")
    by_title = catalog_repo.load_questions("Inheritance")
    assert [q.prompt for q in by_name] == [q.prompt for q in by_title]


def test_each_load_returns_a_fresh_list():
    first = catalog_repo.load_questions("polymorphism")
    first.clear()
    assert catalog_repo.load_questions("polymorphism")


def test_unknown_topic_raises():
    with pytest.raises(QuestionLoadError):
        catalog_repo.load_questions("recursion")


def test_explicit_accepted_answers_survive_loading():
    questions = catalog_repo.load_questions("encapsulation")
    fills = [q for q in questions if isinstance(q, FillCodeQuestion) and q.answer == "this.age"]
    assert fills
    assert fills[0].verify("this . age")


def test_catalog_path_override(monkeypatch, tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps(small_bank()), encoding="utf-8")
    monkeypatch.setenv("CATALOG_PATH", str(path))

    assert catalog_repo.list_topics() == [("recursion", "Recursion")]
    questions = catalog_repo.load_questions("recursion")
    assert questions[0].verify("1")


def test_missing_bank_file_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_PATH", str(tmp_path / "missing.json"))
    with pytest.raises(FileNotFoundError):
        catalog_repo.list_topics()


def test_empty_topic_raises(monkeypatch, tmp_path):
    bank = small_bank()
    bank["topics"][0]["questions"] = []
    path = tmp_path / "bank.json"
    path.write_text(json.dumps(bank), encoding="utf-8")
    monkeypatch.setenv("CATALOG_PATH", str(path))

    with pytest.raises(QuestionLoadError):
        catalog_repo.load_questions("recursion")


@pytest.mark.parametrize("question", [
    {"kind": "multiple_choice", "difficulty": "easy", "prompt": "P", "explanation": "E",
     "options": ["a", "b", "c"], "correct": "A"},
    {"kind": "multiple_choice", "difficulty": "easy", "prompt": "P", "explanation": "E",
     "options": ["a", "b", "c", "d"], "correct": "F"},
    {"kind": "essay", "difficulty": "easy", "prompt": "P", "explanation": "E"},
    {"kind": "fill_code", "difficulty": "trivial", "prompt": "P", "explanation": "E",
     "template": "______", "answer": "x"},
])
def test_invalid_records_raise(question):
    bank = small_bank()
    bank["topics"][0]["questions"] = [question]
    with pytest.raises(InvalidQuestionError):
        catalog_repo.parse_catalog(bank).topics[0].to_questions()


def test_invalid_source_raises(monkeypatch):
    monkeypatch.setenv("CATALOG_SOURCE", "ftp")
    with pytest.raises(ValueError):
        catalog_repo.get_catalog_source()


# ---- Mongo Source ----

class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction):
        ordered = sorted(self._documents, key=lambda d: d[key], reverse=direction < 0)
        return iter(ordered)


class FakeCollection:
    def __init__(self, documents):
        self.documents = documents

    def find(self, query, projection):
        return FakeCursor([dict(document) for document in self.documents])


@pytest.fixture
def mongo_topics(monkeypatch):
    documents = []
    for position, name in ((1, "inheritance"), (0, "recursion")):
        topic = small_bank(name)["topics"][0]
        topic["position"] = position
        documents.append(topic)
    monkeypatch.setattr(catalog_repo, "_collection", FakeCollection(documents))
    monkeypatch.setenv("CATALOG_SOURCE", "mongo")
    return documents


def test_mongo_topics_follow_position(mongo_topics):
    assert catalog_repo.list_topics() == [
        ("recursion", "Recursion"),
        ("inheritance", "Inheritance"),
    ]


def test_mongo_load_questions(mongo_topics):
    questions = catalog_repo.load_questions("INHERITANCE", source="mongo")
    assert len(questions) == 1
    assert questions[0].canonical_answer() == "1"


def test_mongo_invalid_document_raises(mongo_topics):
    mongo_topics[0]["questions"][0]["kind"] = "essay"
    with pytest.raises(InvalidQuestionError):
        catalog_repo.get_topics("mongo")
