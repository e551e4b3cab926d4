"""
Question Variants

The closed set of quiz items served by a topic exercise:
- MultipleChoiceQuestion: four options, one correct letter
- FillCodeQuestion: code template with a blank, one canonical completion
- IdentifyErrorQuestion: flawed snippet, four justifications, one correct

Every variant answers the same three calls: verify(), canonical_answer()
and render(). Questions are immutable and validated on construction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence

from core.constants import OPTION_LETTERS, PARTIAL_MATCH_THRESHOLD
from core.errors import InvalidQuestionError
from core.questions.types import Difficulty, QuestionKind


HEADER_WIDTH = 60
CODE_RULE_WIDTH = 40


def _require_text(value: object, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidQuestionError(f"Question {field_name} must be a non-empty string")


def _normalize(answer: Optional[str]) -> Optional[str]:
    """
    Trim and lower-case a submission; None when there is nothing to check.
    """
    if answer is None:
        return None
    cleaned = str(answer).strip()
    if not cleaned:
        return None
    return cleaned.lower()


def _freeze_options(question: "Question", options: Sequence[str]) -> None:
    options = tuple(options or ())
    if len(options) != len(OPTION_LETTERS):
        raise InvalidQuestionError(
            f"Expected {len(OPTION_LETTERS)} options, got {len(options)}"
        )
    for option in options:
        _require_text(option, "option")
    object.__setattr__(question, "options", options)


def _render_options(options: Sequence[str]) -> list[str]:
    return [f"{letter}) {option}" for letter, option in zip(OPTION_LETTERS, options)]


@dataclass(frozen=True)
class Question(ABC):
    """
    Base for all quiz items.

    Subclasses set `kind` and implement verify, canonical_answer and render.
    """
    prompt: str
    difficulty: Difficulty
    explanation: str

    kind: ClassVar[QuestionKind]

    def __post_init__(self) -> None:
        _require_text(self.prompt, "prompt")
        _require_text(self.explanation, "explanation")
        try:
            object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))
        except ValueError as exc:
            raise InvalidQuestionError(str(exc)) from exc

    @property
    def weight(self) -> int:
        """Ordering key used by the sequencer."""
        return self.difficulty.weight

    @abstractmethod
    def verify(self, answer: Optional[str]) -> bool:
        """Return True when the submitted answer is accepted."""

    @abstractmethod
    def canonical_answer(self) -> str:
        """Return the reference answer shown after a miss."""

    @abstractmethod
    def render(self) -> str:
        """Return a plain-text rendering of the question."""

    def _header_lines(self) -> list[str]:
        return [
            "=" * HEADER_WIDTH,
            f"QUESTION [{self.kind.label} - {self.difficulty.label}]",
            "=" * HEADER_WIDTH,
            self.prompt,
            "",
        ]


@dataclass(frozen=True)
class MultipleChoiceQuestion(Question):
    options: tuple[str, ...]
    correct: str

    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE

    def __post_init__(self) -> None:
        super().__post_init__()
        _freeze_options(self, self.options)
        _require_text(self.correct, "correct option")
        letter = self.correct.strip().upper()
        if letter not in OPTION_LETTERS:
            raise InvalidQuestionError(f"Correct option must be one of {OPTION_LETTERS}, got {self.correct!r}")
        object.__setattr__(self, "correct", letter)

    def verify(self, answer: Optional[str]) -> bool:
        submitted = _normalize(answer)
        return submitted is not None and submitted == self.correct.lower()

    def canonical_answer(self) -> str:
        return self.correct

    def option_answer(self, index: int) -> str:
        """Answer text a learner submits when picking option `index`."""
        return OPTION_LETTERS[index]

    def render(self) -> str:
        lines = self._header_lines()
        lines.extend(_render_options(self.options))
        lines.append("")
        lines.append("-" * HEADER_WIDTH)
        return "\n".join(lines)


@dataclass(frozen=True)
class FillCodeQuestion(Question):
    """
    Complete-the-code question.

    Accepted answers:
    1. the canonical answer, ignoring case and surrounding whitespace
    2. any accepted variant (derived from the canonical answer unless an
       explicit list is supplied)
    3. free text containing at least PARTIAL_MATCH_THRESHOLD of the
       canonical answer's tokens
    """
    template: str
    answer: str
    accepted_answers: tuple[str, ...] = ()
    keywords: tuple[str, ...] = field(init=False, repr=False, compare=False)

    kind: ClassVar[QuestionKind] = QuestionKind.FILL_CODE

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_text(self.template, "template")
        _require_text(self.answer, "answer")

        if self.accepted_answers:
            accepted = tuple(str(alt) for alt in self.accepted_answers)
        else:
            accepted = self._derive_variants(self.answer)
        object.__setattr__(self, "accepted_answers", accepted)
        object.__setattr__(self, "keywords", tuple(self.answer.split()))

    @staticmethod
    def _derive_variants(answer: str) -> tuple[str, ...]:
        base = answer.strip()
        variants = [
            base.lower(),
            base.upper(),
            base,
            base.replace(" ", ""),
            base.replace("_", " "),
            base.replace(" ", "_"),
        ]
        # dict.fromkeys keeps first-seen order
        return tuple(dict.fromkeys(variants))

    def verify(self, answer: Optional[str]) -> bool:
        submitted = _normalize(answer)
        if submitted is None:
            return False

        if submitted == self.answer.strip().lower():
            return True

        for alternative in self.accepted_answers:
            if submitted == alternative.strip().lower():
                return True

        return self._matches_keywords(submitted)

    def _matches_keywords(self, submitted: str) -> bool:
        if not self.keywords:
            return False
        found = sum(1 for keyword in self.keywords if keyword.lower() in submitted)
        return found / len(self.keywords) >= PARTIAL_MATCH_THRESHOLD

    def canonical_answer(self) -> str:
        return self.answer

    def hint(self) -> str:
        return self.difficulty.hint

    def render(self) -> str:
        lines = self._header_lines()
        lines.extend([
            "CODE TO COMPLETE:",
            "-" * CODE_RULE_WIDTH,
            self.template,
            "-" * CODE_RULE_WIDTH,
            "Tip: type only the word or expression that replaces ______",
        ])
        return "\n".join(lines)


@dataclass(frozen=True)
class IdentifyErrorQuestion(Question):
    code: str
    options: tuple[str, ...]
    correct: str

    kind: ClassVar[QuestionKind] = QuestionKind.IDENTIFY_ERROR

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_text(self.code, "code")
        _freeze_options(self, self.options)
        _require_text(self.correct, "correct justification")

    def verify(self, answer: Optional[str]) -> bool:
        submitted = _normalize(answer)
        return submitted is not None and submitted == self.correct.strip().lower()

    def canonical_answer(self) -> str:
        return self.correct

    def option_answer(self, index: int) -> str:
        """
        Answer text for option `index`: its letter when the stored answer is
        a letter, otherwise the justification itself.
        """
        if self.correct.strip().upper() in OPTION_LETTERS:
            return OPTION_LETTERS[index]
        return self.options[index]

    def render(self) -> str:
        lines = self._header_lines()
        lines.extend([
            "CODE WITH ERROR:",
            "-" * CODE_RULE_WIDTH,
            self.code,
            "-" * CODE_RULE_WIDTH,
            "",
        ])
        lines.extend(_render_options(self.options))
        lines.append("")
        lines.append("-" * HEADER_WIDTH)
        return "\n".join(lines)
