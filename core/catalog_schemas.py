"""
Pydantic models for the question bank.

These models define the structure of the JSON bank file and of the MongoDB
topic documents. Each record converts itself into an immutable Question.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from core.questions import (
    Difficulty,
    FillCodeQuestion,
    IdentifyErrorQuestion,
    MultipleChoiceQuestion,
    Question,
)


# ---- Question Records ----

class QuestionRecordBase(BaseModel):
    """Fields shared by every question record."""
    prompt: str = Field(..., min_length=1, description="Question statement")
    difficulty: Difficulty = Field(..., description="easy, medium or hard")
    explanation: str = Field(..., min_length=1, description="Shown after an incorrect answer")

    @field_validator("difficulty", mode="before")
    @classmethod
    def _parse_difficulty(cls, value):
        return Difficulty.parse(value)


class MultipleChoiceRecord(QuestionRecordBase):
    kind: Literal["multiple_choice"] = "multiple_choice"
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct: str = Field(..., min_length=1, description="Letter of the correct option")

    def to_question(self) -> Question:
        return MultipleChoiceQuestion(
            prompt=self.prompt,
            difficulty=self.difficulty,
            explanation=self.explanation,
            options=tuple(self.options),
            correct=self.correct,
        )


class FillCodeRecord(QuestionRecordBase):
    kind: Literal["fill_code"] = "fill_code"
    template: str = Field(..., min_length=1, description="Code with a ______ blank")
    answer: str = Field(..., min_length=1)
    accepted_answers: list[str] = Field(
        default_factory=list,
        description="Explicit accepted variants; derived from the answer when empty"
    )

    def to_question(self) -> Question:
        return FillCodeQuestion(
            prompt=self.prompt,
            difficulty=self.difficulty,
            explanation=self.explanation,
            template=self.template,
            answer=self.answer,
            accepted_answers=tuple(self.accepted_answers),
        )


class IdentifyErrorRecord(QuestionRecordBase):
    kind: Literal["identify_error"] = "identify_error"
    code: str = Field(..., min_length=1, description="Snippet containing the defect")
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct: str = Field(..., min_length=1, description="Correct justification")

    def to_question(self) -> Question:
        return IdentifyErrorQuestion(
            prompt=self.prompt,
            difficulty=self.difficulty,
            explanation=self.explanation,
            code=self.code,
            options=tuple(self.options),
            correct=self.correct,
        )


QuestionRecord = Annotated[
    Union[MultipleChoiceRecord, FillCodeRecord, IdentifyErrorRecord],
    Field(discriminator="kind"),
]


# ---- Topics ----

class TopicRecord(BaseModel):
    """A named topic and its questions, in authoring order."""
    name: str = Field(..., min_length=1, description="Lookup key, e.g. 'encapsulation'")
    title: str = Field(..., min_length=1, description="Display title")
    questions: list[QuestionRecord] = Field(default_factory=list)

    def matches(self, topic: str) -> bool:
        key = (topic or "").strip().lower()
        return key in (self.name.strip().lower(), self.title.strip().lower())

    def to_questions(self) -> list[Question]:
        return [record.to_question() for record in self.questions]


class CatalogDocument(BaseModel):
    """Top-level structure of the bank file."""
    version: int = 1
    topics: list[TopicRecord] = Field(default_factory=list)
