"""
Tests for question ordering.
"""

import random

import pytest

from core import sequencer
from core.questions import Difficulty, FillCodeQuestion
from core.sequencer import OrderingPolicy, reorder


def make_question(difficulty, label):
    return FillCodeQuestion(
        prompt=f"Question {label}",
        difficulty=difficulty,
        explanation="Because.",
        template="______",
        answer=label,
    )


def mixed_questions():
    weights = [2, 1, 3, 1, 2, 3, 1, 2]
    return [make_question(weight, f"q{i}") for i, weight in enumerate(weights)]


def weights_of(questions):
    return [q.weight for q in questions]


def test_ascending_orders_easiest_first():
    questions = mixed_questions()
    applied = reorder(questions, "ascending")
    assert applied is OrderingPolicy.ASCENDING
    assert weights_of(questions) == [1, 1, 1, 2, 2, 2, 3, 3]


def test_descending_orders_hardest_first():
    questions = mixed_questions()
    reorder(questions, OrderingPolicy.DESCENDING)
    assert weights_of(questions) == [3, 3, 2, 2, 2, 1, 1, 1]


def test_sorting_keeps_the_same_questions():
    questions = mixed_questions()
    before = {q.answer for q in questions}
    reorder(questions, "descending")
    assert {q.answer for q in questions} == before
    assert len(questions) == 8


def test_policy_names_ignore_case():
    questions = mixed_questions()
    assert reorder(questions, "  AsCeNdInG ") is OrderingPolicy.ASCENDING
    assert weights_of(questions) == sorted(weights_of(questions))


def test_randomized_is_reproducible_with_seeded_rng():
    first = mixed_questions()
    second = mixed_questions()
    reorder(first, "randomized", random.Random(42))
    reorder(second, "randomized", random.Random(42))
    assert [q.answer for q in first] == [q.answer for q in second]


def test_module_seed_makes_default_shuffle_reproducible():
    first = mixed_questions()
    second = mixed_questions()
    sequencer.seed(7)
    reorder(first, "random")
    sequencer.seed(7)
    reorder(second, "shuffled")
    assert [q.answer for q in first] == [q.answer for q in second]


def test_unknown_policy_falls_back_to_randomized():
    questions = mixed_questions()
    applied = reorder(questions, "by_colour", random.Random(1))
    assert applied is OrderingPolicy.RANDOMIZED
    assert sorted(q.answer for q in questions) == sorted(q.answer for q in mixed_questions())


@pytest.mark.parametrize("policy", ["ascending", "descending", "randomized"])
def test_empty_and_single_lists_are_untouched(policy):
    empty = []
    reorder(empty, policy)
    assert empty == []

    single = [make_question(Difficulty.HARD, "only")]
    reorder(single, policy)
    assert [q.answer for q in single] == ["only"]


def test_many_equal_weights_sort_without_recursion_error():
    questions = [make_question(Difficulty.MEDIUM, f"q{i}") for i in range(3000)]
    reorder(questions, "ascending")
    reorder(questions, "descending")
    assert len(questions) == 3000
    assert set(weights_of(questions)) == {2}


def test_policy_labels():
    assert OrderingPolicy.ASCENDING.label == "Easiest first"
    assert OrderingPolicy.parse(OrderingPolicy.DESCENDING) is OrderingPolicy.DESCENDING
