#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the expressions a grammar is composed of.

Expressions are immutable.  Evaluating one never stores anything on the
instance: the consumed text travels in the returned match, which makes a
grammar reusable across parses and across branches of the same grammar.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Protocol
from typing import TypeVar

from combparse.exceptions import InvalidArity
from combparse.exceptions import InvalidTerminal
from combparse.grammar.formatter import ExpressionFormatter
from combparse.grammar.result import Match
from combparse.grammar.result import Mismatch
from combparse.grammar.result import NoAlternativeMatched
from combparse.grammar.result import TerminalMismatch
from combparse.syntax.nodes import EpsilonNode
from combparse.syntax.nodes import OrderedChoiceNode
from combparse.syntax.nodes import SequenceNode
from combparse.syntax.nodes import TerminalNode
from combparse.tracing import LOGGING_LISTENER


if TYPE_CHECKING:
    from combparse.grammar.result import MatchResult
    from combparse.grammar.visitor import ExpressionVisitor
    from combparse.syntax.nodes import SyntaxNode
    from combparse.tracing import EvaluationListener


T_co = TypeVar("T_co", covariant=True)


class Expression(Protocol):
    """A grammar expression."""

    @abstractmethod
    def evaluate(
        self, remaining: str, listener: EvaluationListener | None = None
    ) -> MatchResult:
        """Try to match a prefix of the remaining input.

        The remaining input is never modified; on success the returned match
        holds the new remainder.

        Args:
            remaining: The input left to parse.
            listener: The listener notified about the evaluation, the logging
                listener if None.

        Returns:
            A match if a prefix of the input matched, a mismatch otherwise.
        """

    @abstractmethod
    def accept(self, visitor: ExpressionVisitor[T_co]) -> T_co:
        """Accept a visitor.

        Args:
            visitor: The visitor to accept.

        Returns:
            The result of accepting the visitor.
        """


_FORMATTER = ExpressionFormatter()


@dataclass(frozen=True)
class Terminal(Expression):
    """Matches a fixed literal at the start of the input."""

    literal: str

    def __post_init__(self) -> None:
        if not isinstance(self.literal, str):
            raise InvalidTerminal(
                f"Terminal literals must be strings, got {type(self.literal).__name__}"
            )
        if not self.literal:
            raise InvalidTerminal(
                "Empty terminal literals are not permitted, use Epsilon instead"
            )

    def evaluate(  # noqa: D102
        self, remaining: str, listener: EvaluationListener | None = None
    ) -> MatchResult:
        listener = LOGGING_LISTENER if listener is None else listener
        listener.before_evaluation(self, remaining)

        if remaining.startswith(self.literal):
            match = Match(
                TerminalNode(self.literal),
                self.literal,
                remaining[len(self.literal) :],
            )
            listener.after_match(self, match)
            return match

        mismatch = TerminalMismatch(
            self.literal, remaining[: len(self.literal)], remaining
        )
        listener.after_mismatch(self, mismatch)
        return mismatch

    def accept(self, visitor: ExpressionVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_terminal(self)

    def __str__(self) -> str:
        return self.accept(_FORMATTER)


@dataclass(frozen=True)
class Epsilon(Expression):
    """Matches the empty string, i.e., always matches and consumes nothing."""

    def evaluate(  # noqa: D102
        self, remaining: str, listener: EvaluationListener | None = None
    ) -> MatchResult:
        listener = LOGGING_LISTENER if listener is None else listener
        listener.before_evaluation(self, remaining)
        match = Match(EpsilonNode(), "", remaining)
        listener.after_match(self, match)
        return match

    def accept(self, visitor: ExpressionVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_epsilon(self)

    def __str__(self) -> str:
        return self.accept(_FORMATTER)


@dataclass(frozen=True)
class Sequence(Expression):
    """Matches all of its expressions, one after the other.

    The first expression that fails aborts the sequence, and its mismatch is
    returned unchanged.
    """

    expressions: tuple[Expression, ...]

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as tuples
        object.__setattr__(self, "expressions", tuple(self.expressions))
        if len(self.expressions) < 2:
            raise InvalidArity(
                "A sequence requires at least two expressions, "
                f"got {len(self.expressions)}"
            )

    def evaluate(  # noqa: D102
        self, remaining: str, listener: EvaluationListener | None = None
    ) -> MatchResult:
        listener = LOGGING_LISTENER if listener is None else listener
        listener.before_evaluation(self, remaining)

        cursor = remaining
        consumed: list[str] = []
        children: list[SyntaxNode] = []
        for index, expression in enumerate(self.expressions):
            listener.before_child(self, index, expression, cursor)
            result = expression.evaluate(cursor, listener)
            if isinstance(result, Mismatch):
                listener.after_mismatch(self, result)
                return result

            consumed.append(result.consumed)
            children.append(result.node)
            cursor = result.remaining

        text = "".join(consumed)
        match = Match(SequenceNode(text, tuple(children)), text, cursor)
        listener.after_match(self, match)
        return match

    def accept(self, visitor: ExpressionVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_sequence(self)

    def __str__(self) -> str:
        return self.accept(_FORMATTER)


@dataclass(frozen=True)
class OrderedChoice(Expression):
    """Matches the first of its alternatives that matches.

    Every alternative is evaluated against the original input.  Once an
    alternative matched, the later ones are not evaluated, even if they would
    match as well.
    """

    alternatives: tuple[Expression, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternatives", tuple(self.alternatives))
        if not self.alternatives:
            raise InvalidArity("An ordered choice requires at least one alternative")

    def evaluate(  # noqa: D102
        self, remaining: str, listener: EvaluationListener | None = None
    ) -> MatchResult:
        listener = LOGGING_LISTENER if listener is None else listener
        listener.before_evaluation(self, remaining)

        failures: list[Mismatch] = []
        for index, alternative in enumerate(self.alternatives):
            listener.before_child(self, index, alternative, remaining)
            result = alternative.evaluate(remaining, listener)
            if isinstance(result, Mismatch):
                failures.append(result)
                continue

            match = Match(
                OrderedChoiceNode(result.consumed, index, result.node),
                result.consumed,
                result.remaining,
            )
            listener.after_match(self, match)
            return match

        mismatch = NoAlternativeMatched(self, remaining, tuple(failures))
        listener.after_mismatch(self, mismatch)
        return mismatch

    def accept(self, visitor: ExpressionVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_ordered_choice(self)

    def __str__(self) -> str:
        return self.accept(_FORMATTER)
