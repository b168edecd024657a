#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides functions to compose grammar expressions.

Composing a sequence with further expressions yields a single flat sequence
instead of nested ones, e.g., ``sequence_of(sequence_of(a, b), c)`` equals
``Sequence((a, b, c))``; ordered choices are flattened the same way.  To nest
combinators deliberately, call their constructors directly.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from combparse.grammar.expression import OrderedChoice
from combparse.grammar.expression import Sequence


if TYPE_CHECKING:
    from combparse.grammar.expression import Expression


def sequence_of(*expressions: Expression) -> Sequence:
    """Compose expressions to a sequence.

    Operands that are sequences themselves are spliced into the result.

    Args:
        *expressions: The expressions to match one after the other.

    Returns:
        A flat sequence of the expressions.
    """
    flattened: list[Expression] = []
    for expression in expressions:
        if isinstance(expression, Sequence):
            flattened.extend(expression.expressions)
        else:
            flattened.append(expression)
    return Sequence(tuple(flattened))


def ordered_choice_of(*expressions: Expression) -> OrderedChoice:
    """Compose expressions to an ordered choice.

    Operands that are ordered choices themselves are spliced into the result,
    keeping the order of all alternatives.

    Args:
        *expressions: The alternatives, in the order they shall be tried.

    Returns:
        A flat ordered choice of the expressions.
    """
    flattened: list[Expression] = []
    for expression in expressions:
        if isinstance(expression, OrderedChoice):
            flattened.extend(expression.alternatives)
        else:
            flattened.append(expression)
    return OrderedChoice(tuple(flattened))
