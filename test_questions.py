"""
Tests for question variants and the question factory.

Covers:
1. Multiple-choice letter checking
2. Fill-code variants and partial keyword matching
3. Identify-error checking by letter or justification text
4. Construction-time validation
"""

import pytest

from core.errors import InvalidQuestionError
from core.questions import (
    Difficulty,
    FillCodeQuestion,
    IdentifyErrorQuestion,
    MultipleChoiceQuestion,
    QuestionKind,
    create_question,
)


OPTIONS = ("public", "private", "protected", "default")


def make_mc(correct="B", difficulty=Difficulty.EASY):
    return MultipleChoiceQuestion(
        prompt="Which modifier hides a field from other classes?",
        difficulty=difficulty,
        explanation="private restricts access to the declaring class.",
        options=OPTIONS,
        correct=correct,
    )


def make_fill(answer="this nome", **kwargs):
    return FillCodeQuestion(
        prompt="Complete the assignment.",
        difficulty=kwargs.pop("difficulty", Difficulty.MEDIUM),
        explanation="Use this to refer to the field.",
        template="public void setNome(String nome) { ______ = nome; }",
        answer=answer,
        **kwargs,
    )


# ---- Multiple Choice ----

def test_multiple_choice_ignores_case_and_whitespace():
    question = make_mc()
    assert question.verify(" B ")
    assert question.verify("b")
    assert not question.verify("A")


def test_multiple_choice_blank_answers_never_verify():
    question = make_mc()
    assert not question.verify(None)
    assert not question.verify("")
    assert not question.verify("   ")


def test_multiple_choice_normalizes_correct_letter():
    question = make_mc(correct=" c ")
    assert question.correct == "C"
    assert question.canonical_answer() == "C"
    assert question.option_answer(2) == "C"


def test_multiple_choice_render_lists_lettered_options():
    rendered = make_mc().render()
    assert "QUESTION [Multiple Choice - Easy]" in rendered
    assert "A) public" in rendered
    assert "D) default" in rendered


def test_weight_follows_difficulty():
    assert make_mc(difficulty="hard").weight == 3
    assert make_mc(difficulty=1).weight == 1
    assert make_mc(difficulty="Medium").difficulty is Difficulty.MEDIUM


# ---- Fill Code ----

def test_fill_code_accepts_canonical_answer_any_case():
    question = make_fill()
    assert question.verify("this nome")
    assert question.verify("  THIS NOME ")


def test_fill_code_accepts_derived_variants():
    question = make_fill()
    assert "this_nome" in question.accepted_answers
    assert question.verify("This_Nome")
    assert question.verify("thisnome")


def test_fill_code_rejects_half_of_the_keywords():
    assert not make_fill().verify("nome")


def test_fill_code_accepts_keywords_scattered_in_text():
    assert make_fill().verify("I would write this before the nome field")


def test_fill_code_partial_keyword_match():
    question = make_fill(answer="private int age")
    assert question.verify("I think private and int age")
    assert question.verify("private int")
    assert not question.verify("private")


def test_fill_code_explicit_accepted_answers_replace_variants():
    question = make_fill(answer="this.age", accepted_answers=["this . age"])
    assert question.accepted_answers == ("this . age",)
    assert question.verify("this . age")
    assert question.verify("THIS.AGE")
    assert not question.verify("that.age")


def test_fill_code_hint_depends_on_difficulty():
    easy = make_fill(difficulty=Difficulty.EASY)
    hard = make_fill(difficulty=Difficulty.HARD)
    assert easy.hint() == Difficulty.EASY.hint
    assert easy.hint() != hard.hint()


def test_fill_code_render_shows_template():
    rendered = make_fill().render()
    assert "QUESTION [Complete the Code - Medium]" in rendered
    assert "CODE TO COMPLETE:" in rendered
    assert "public void setNome(String nome) { ______ = nome; }" in rendered


def test_fill_code_blank_answers_never_verify():
    question = make_fill()
    assert not question.verify(None)
    assert not question.verify("  ")


# ---- Identify Error ----

def test_identify_error_by_letter():
    question = IdentifyErrorQuestion(
        prompt="What is wrong with this class?",
        difficulty=Difficulty.HARD,
        explanation="An abstract method cannot have a body.",
        code="abstract class Shape { abstract double area() { return 0; } }",
        options=("Missing return", "Abstract method with a body", "Wrong name", "Nothing"),
        correct="B",
    )
    assert question.verify("b")
    assert not question.verify("Abstract method with a body")
    assert question.option_answer(1) == "B"
    assert "CODE WITH ERROR:" in question.render()


def test_identify_error_by_justification_text():
    question = IdentifyErrorQuestion(
        prompt="What is wrong with this class?",
        difficulty=Difficulty.HARD,
        explanation="An abstract method cannot have a body.",
        code="abstract class Shape { abstract double area() { return 0; } }",
        options=("Missing return", "Abstract method with a body", "Wrong name", "Nothing"),
        correct="Abstract method with a body",
    )
    assert question.verify("  abstract METHOD with a body ")
    assert question.option_answer(1) == "Abstract method with a body"


# ---- Validation ----

@pytest.mark.parametrize("kwargs", [
    {"prompt": ""},
    {"explanation": "   "},
    {"options": ("a", "b", "c")},
    {"correct": "E"},
    {"correct": ""},
    {"difficulty": "impossible"},
])
def test_multiple_choice_construction_errors(kwargs):
    fields = {
        "prompt": "Prompt",
        "difficulty": Difficulty.EASY,
        "explanation": "Because.",
        "options": OPTIONS,
        "correct": "A",
    }
    fields.update(kwargs)
    with pytest.raises(InvalidQuestionError):
        MultipleChoiceQuestion(**fields)


def test_fill_code_requires_answer():
    with pytest.raises(InvalidQuestionError):
        make_fill(answer=" ")


def test_invalid_question_error_is_value_error():
    with pytest.raises(ValueError):
        make_mc(correct="Z")


def test_questions_are_immutable():
    question = make_mc()
    with pytest.raises(AttributeError):
        question.correct = "A"


# ---- Factory ----

def test_create_question_builds_each_kind():
    mc = create_question("multiple_choice", "easy", "Prompt", [*OPTIONS, "b"], "Because.")
    fill = create_question(QuestionKind.FILL_CODE, 2, "Prompt", ["x = ______;", "10"], "Because.")
    identify = create_question(
        "identify_error", Difficulty.HARD, "Prompt",
        ["int x = \"a\";", *OPTIONS, "A"], "Because."
    )

    assert isinstance(mc, MultipleChoiceQuestion) and mc.correct == "B"
    assert isinstance(fill, FillCodeQuestion) and fill.answer == "10"
    assert isinstance(identify, IdentifyErrorQuestion) and identify.options == OPTIONS


@pytest.mark.parametrize("kind,data", [
    ("multiple_choice", list(OPTIONS)),
    ("fill_code", ["only template"]),
    ("identify_error", ["code", *OPTIONS]),
    ("fill_code", None),
    ("essay", ["a", "b"]),
])
def test_create_question_rejects_bad_payload(kind, data):
    with pytest.raises(InvalidQuestionError):
        create_question(kind, "easy", "Prompt", data, "Because.")
