#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the visitor interface for grammar expressions."""
from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import Protocol
from typing import TypeVar


if TYPE_CHECKING:
    from combparse.grammar.expression import Epsilon
    from combparse.grammar.expression import OrderedChoice
    from combparse.grammar.expression import Sequence
    from combparse.grammar.expression import Terminal


T_co = TypeVar("T_co", covariant=True)


class ExpressionVisitor(Protocol[T_co]):
    """A visitor for grammar expressions."""

    @abstractmethod
    def visit_terminal(self, terminal: Terminal) -> T_co:
        """Visit a terminal.

        Args:
            terminal: The terminal to visit.

        Returns:
            The result of visiting the terminal.
        """

    @abstractmethod
    def visit_epsilon(self, epsilon: Epsilon) -> T_co:
        """Visit an epsilon.

        Args:
            epsilon: The epsilon to visit.

        Returns:
            The result of visiting the epsilon.
        """

    @abstractmethod
    def visit_sequence(self, sequence: Sequence) -> T_co:
        """Visit a sequence.

        Args:
            sequence: The sequence to visit.

        Returns:
            The result of visiting the sequence.
        """

    @abstractmethod
    def visit_ordered_choice(self, ordered_choice: OrderedChoice) -> T_co:
        """Visit an ordered choice.

        Args:
            ordered_choice: The ordered choice to visit.

        Returns:
            The result of visiting the ordered choice.
        """
