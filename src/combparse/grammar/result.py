#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the values returned by the evaluation of an expression.

A mismatch is an expected outcome while backtracking, hence evaluation returns
it as a value instead of raising it.
"""
from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import TypeAlias

from combparse.grammar.formatter import quote


if TYPE_CHECKING:
    from combparse.grammar.expression import OrderedChoice
    from combparse.syntax.nodes import SyntaxNode


@dataclass(frozen=True)
class Match:
    """The result of a successful evaluation.

    Attributes:
        node: The syntax node describing the match.
        consumed: The exact text consumed from the input.
        remaining: The input left after the consumed prefix.
    """

    node: SyntaxNode
    consumed: str
    remaining: str


class Mismatch(ABC):
    """The result of a failed evaluation."""

    @property
    @abstractmethod
    def message(self) -> str:
        """A description of what was expected and what was seen.

        Returns:
            The description.
        """

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TerminalMismatch(Mismatch):
    """The input does not start with the literal of a terminal.

    Attributes:
        expected: The literal of the terminal.
        actual_prefix: The prefix of the input that was seen instead.
        remaining: The whole input the terminal was evaluated against.
    """

    expected: str
    actual_prefix: str
    remaining: str

    @property
    def message(self) -> str:  # noqa: D102
        expected = quote(self.expected)
        return f"expected {expected} but found {quote(self.actual_prefix)}"


@dataclass(frozen=True)
class NoAlternativeMatched(Mismatch):
    """None of the alternatives of an ordered choice matched.

    Attributes:
        expression: The ordered choice that failed.
        remaining: The input the alternatives were evaluated against.
        failures: The mismatch of every alternative, in attempt order.
    """

    expression: OrderedChoice
    remaining: str
    failures: tuple[Mismatch, ...]

    @property
    def expected(self) -> str:
        """The rendered ordered choice, computed when it is read.

        Returns:
            The ordered choice as text.
        """
        return str(self.expression)

    @property
    def message(self) -> str:  # noqa: D102
        lines = [
            f"While attempting to match {quote(self.remaining)} "
            f"with {self.expected}, "
            "the following alternatives failed:"
        ]
        for index, failure in enumerate(self.failures):
            failure_lines = failure.message.splitlines()
            lines.append(f"  {index}: {failure_lines[0]}")
            lines.extend(f"     {line}" for line in failure_lines[1:])
        return "\n".join(lines)


@dataclass(frozen=True)
class UnconsumedInput(Mismatch):
    """The grammar matched, but not the whole input.

    Attributes:
        match: The match of the grammar.
    """

    match: Match

    @property
    def message(self) -> str:  # noqa: D102
        return (
            f"matched {quote(self.match.consumed)} but "
            f"{quote(self.match.remaining)} was left unconsumed"
        )


MatchResult: TypeAlias = Match | Mismatch
