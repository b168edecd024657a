#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides listeners that observe the evaluation of expressions.

Listeners are a write-only side channel: they never influence the outcome of an
evaluation, so the null listener can replace any other listener.
"""
from __future__ import annotations

import logging

from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import Protocol

from combparse.grammar.formatter import quote


if TYPE_CHECKING:
    from combparse.grammar.expression import Expression
    from combparse.grammar.result import Match
    from combparse.grammar.result import Mismatch


class EvaluationListener(Protocol):
    """Observes the evaluation of expressions."""

    @abstractmethod
    def before_evaluation(self, expression: Expression, remaining: str) -> None:
        """Called before an expression is evaluated.

        Args:
            expression: The expression about to be evaluated.
            remaining: The input it is evaluated against.
        """

    @abstractmethod
    def before_child(
        self, parent: Expression, index: int, child: Expression, remaining: str
    ) -> None:
        """Called before a combinator evaluates one of its expressions.

        Args:
            parent: The combinator.
            index: The position of the child within the combinator.
            child: The child about to be evaluated.
            remaining: The input the child is evaluated against.
        """

    @abstractmethod
    def after_match(self, expression: Expression, match: Match) -> None:
        """Called after an expression matched.

        Args:
            expression: The evaluated expression.
            match: The match.
        """

    @abstractmethod
    def after_mismatch(self, expression: Expression, mismatch: Mismatch) -> None:
        """Called after an expression failed to match.

        Args:
            expression: The evaluated expression.
            mismatch: The mismatch.
        """


class NullListener(EvaluationListener):
    """A listener that ignores every event."""

    def before_evaluation(  # noqa: D102
        self, expression: Expression, remaining: str
    ) -> None:
        pass

    def before_child(  # noqa: D102
        self, parent: Expression, index: int, child: Expression, remaining: str
    ) -> None:
        pass

    def after_match(self, expression: Expression, match: Match) -> None:  # noqa: D102
        pass

    def after_mismatch(  # noqa: D102
        self, expression: Expression, mismatch: Mismatch
    ) -> None:
        pass


class LoggingListener(EvaluationListener):
    """A listener that writes every event to the log on the debug level."""

    _logger = logging.getLogger(__name__)

    def before_evaluation(  # noqa: D102
        self, expression: Expression, remaining: str
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "evaluating %s on %s", expression, quote(remaining)
            )

    def before_child(  # noqa: D102
        self, parent: Expression, index: int, child: Expression, remaining: str
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "calling expression %d of %s: %s on %s",
                index,
                parent,
                child,
                quote(remaining),
            )

    def after_match(self, expression: Expression, match: Match) -> None:  # noqa: D102
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "%s consumed %s, input left: %s",
                expression,
                quote(match.consumed),
                quote(match.remaining),
            )

    def after_mismatch(  # noqa: D102
        self, expression: Expression, mismatch: Mismatch
    ) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("%s failed: %s", expression, mismatch.message)


NULL_LISTENER = NullListener()
LOGGING_LISTENER = LoggingListener()
