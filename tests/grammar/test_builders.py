#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
import pytest

from combparse.exceptions import InvalidArity
from combparse.grammar.builders import ordered_choice_of
from combparse.grammar.builders import sequence_of
from combparse.grammar.expression import OrderedChoice
from combparse.grammar.expression import Sequence
from combparse.grammar.expression import Terminal


@pytest.fixture()
def a():
    return Terminal("a")


@pytest.fixture()
def b():
    return Terminal("b")


@pytest.fixture()
def c():
    return Terminal("c")


def test_sequence_of(a, b):
    assert sequence_of(a, b) == Sequence((a, b))


def test_sequence_of_flattens_left(a, b, c):
    assert sequence_of(sequence_of(a, b), c) == Sequence((a, b, c))


def test_sequence_of_flattens_right(a, b, c):
    assert sequence_of(a, sequence_of(b, c)) == Sequence((a, b, c))


def test_sequence_of_keeps_other_combinators(a, b, c):
    choice = ordered_choice_of(b, c)
    assert sequence_of(a, choice) == Sequence((a, choice))


def test_sequence_of_single_expression(a):
    with pytest.raises(InvalidArity):
        sequence_of(a)


def test_sequence_constructor_nests(a, b, c):
    nested = Sequence((Sequence((a, b)), c))
    assert str(nested) == '(("a", "b"), "c")'
    assert str(sequence_of(Sequence((a, b)), c)) == '("a", "b", "c")'


def test_ordered_choice_of(a, b):
    assert ordered_choice_of(a, b) == OrderedChoice((a, b))


def test_ordered_choice_of_flattens_in_order(a, b, c):
    choice = ordered_choice_of(ordered_choice_of(a, b), c)
    assert choice.alternatives == (a, b, c)


def test_ordered_choice_of_repeated_composition():
    choice = Terminal("0")
    for digit in "123456789":
        choice = ordered_choice_of(choice, Terminal(digit))
    assert isinstance(choice, OrderedChoice)
    assert len(choice.alternatives) == 10
    assert choice.evaluate("7").node.alternative == 7


def test_ordered_choice_of_keeps_sequences(a, b, c):
    sequence = sequence_of(a, b)
    assert ordered_choice_of(sequence, c) == OrderedChoice((sequence, c))


def test_ordered_choice_of_nothing():
    with pytest.raises(InvalidArity):
        ordered_choice_of()
