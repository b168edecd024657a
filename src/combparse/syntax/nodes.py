#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the nodes of the syntax trees produced by successful matches.

Every node mirrors the shape of the expression that produced it: a terminal
produces a leaf, a sequence produces one child per component expression and an
ordered choice wraps the node of the single alternative that matched.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol
from typing import TypeVar


T_co = TypeVar("T_co", covariant=True)


class SyntaxNodeVisitor(Protocol[T_co]):
    """A visitor for syntax nodes."""

    @abstractmethod
    def visit_terminal(self, node: TerminalNode) -> T_co:
        """Visit a terminal node.

        Args:
            node: The terminal node to visit.

        Returns:
            The result of visiting the terminal node.
        """

    @abstractmethod
    def visit_epsilon(self, node: EpsilonNode) -> T_co:
        """Visit an epsilon node.

        Args:
            node: The epsilon node to visit.

        Returns:
            The result of visiting the epsilon node.
        """

    @abstractmethod
    def visit_sequence(self, node: SequenceNode) -> T_co:
        """Visit a sequence node.

        Args:
            node: The sequence node to visit.

        Returns:
            The result of visiting the sequence node.
        """

    @abstractmethod
    def visit_ordered_choice(self, node: OrderedChoiceNode) -> T_co:
        """Visit an ordered choice node.

        Args:
            node: The ordered choice node to visit.

        Returns:
            The result of visiting the ordered choice node.
        """


class SyntaxNode(Protocol):
    """A node of a syntax tree.

    Attributes:
        text: The text matched by the expression that produced this node.
        children: The child nodes, in the order of the grammar.
    """

    text: str
    children: tuple[SyntaxNode, ...]

    @abstractmethod
    def accept(self, visitor: SyntaxNodeVisitor[T_co]) -> T_co:
        """Accept a visitor.

        Args:
            visitor: The visitor to accept.

        Returns:
            The result of accepting the visitor.
        """


@dataclass(frozen=True)
class TerminalNode(SyntaxNode):
    """A leaf holding the literal matched by a terminal."""

    text: str

    @property
    def children(self) -> tuple[SyntaxNode, ...]:  # noqa: D102
        return ()

    def accept(self, visitor: SyntaxNodeVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_terminal(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class EpsilonNode(SyntaxNode):
    """A leaf produced by the empty match."""

    @property
    def text(self) -> str:  # noqa: D102
        return ""

    @property
    def children(self) -> tuple[SyntaxNode, ...]:  # noqa: D102
        return ()

    def accept(self, visitor: SyntaxNodeVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_epsilon(self)

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class SequenceNode(SyntaxNode):
    """A node with one child per expression of the matched sequence."""

    text: str
    children: tuple[SyntaxNode, ...]

    def accept(self, visitor: SyntaxNodeVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_sequence(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class OrderedChoiceNode(SyntaxNode):
    """A node wrapping the node of the alternative that matched.

    Failed alternatives leave no trace in the tree.
    """

    text: str
    alternative: int
    child: SyntaxNode

    @property
    def children(self) -> tuple[SyntaxNode, ...]:  # noqa: D102
        return (self.child,)

    def accept(self, visitor: SyntaxNodeVisitor[T_co]) -> T_co:  # noqa: D102
        return visitor.visit_ordered_choice(self)

    def __str__(self) -> str:
        return self.text
