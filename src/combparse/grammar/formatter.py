#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides a visitor that renders grammar expressions as text."""
from __future__ import annotations

import json

from typing import TYPE_CHECKING

from combparse.grammar.visitor import ExpressionVisitor


if TYPE_CHECKING:
    from combparse.grammar.expression import Epsilon
    from combparse.grammar.expression import OrderedChoice
    from combparse.grammar.expression import Sequence
    from combparse.grammar.expression import Terminal


def quote(text: str) -> str:
    """Quote a literal or a piece of input for diagnostics.

    Args:
        text: The text to quote.

    Returns:
        The text in double quotes, with quotes and control characters escaped.
    """
    return json.dumps(text, ensure_ascii=False)


class ExpressionFormatter(ExpressionVisitor[str]):
    """Renders expressions, e.g., ``("if", ("(" | "["))``.

    Terminals are rendered as double-quoted literals, sequences are separated by
    commas and alternatives by bars.  Every combinator is parenthesized, so the
    rendering shows whether combinators were flattened or nested.
    """

    def visit_terminal(self, terminal: Terminal) -> str:  # noqa: D102
        return quote(terminal.literal)

    def visit_epsilon(self, epsilon: Epsilon) -> str:  # noqa: D102
        return "ε"

    def visit_sequence(self, sequence: Sequence) -> str:  # noqa: D102
        expressions = (rule.accept(self) for rule in sequence.expressions)
        return "(" + ", ".join(expressions) + ")"

    def visit_ordered_choice(  # noqa: D102
        self, ordered_choice: OrderedChoice
    ) -> str:
        alternatives = (rule.accept(self) for rule in ordered_choice.alternatives)
        return "(" + " | ".join(alternatives) + ")"
