#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the entry points to parse an input with a grammar."""
from __future__ import annotations

import logging

from typing import TYPE_CHECKING

import combparse.configuration as config

from combparse.exceptions import ParseError
from combparse.grammar.result import Mismatch
from combparse.grammar.result import UnconsumedInput
from combparse.tracing import LOGGING_LISTENER
from combparse.tracing import NULL_LISTENER


if TYPE_CHECKING:
    from combparse.grammar.expression import Expression
    from combparse.grammar.result import Match
    from combparse.syntax.nodes import SyntaxNode
    from combparse.tracing import EvaluationListener


class InputBuffer:
    """The input of a parse, consumed from the front.

    The buffer only advances when a grammar matched, a failed parse leaves it
    untouched.
    """

    def __init__(self, text: str) -> None:
        """Create a new input buffer.

        Args:
            text: The text to parse.
        """
        self._remaining = text
        self._offset = 0

    @property
    def remaining(self) -> str:
        """Provides the input that has not been consumed yet.

        Returns:
            The unconsumed input.
        """
        return self._remaining

    @property
    def offset(self) -> int:
        """Provides the number of characters consumed so far.

        Returns:
            The number of consumed characters.
        """
        return self._offset

    def commit(self, match: Match) -> None:
        """Advance the buffer past the text consumed by a match.

        Args:
            match: A match that was evaluated against the remaining input.
        """
        assert self._remaining.endswith(match.remaining)
        self._offset += len(self._remaining) - len(match.remaining)
        self._remaining = match.remaining

    def __len__(self) -> int:
        return len(self._remaining)

    def __str__(self) -> str:
        return self._remaining


def parse(
    grammar: Expression,
    buffer: InputBuffer,
    listener: EvaluationListener | None = None,
) -> SyntaxNode | Mismatch:
    """Parse the front of the buffer with a grammar.

    Args:
        grammar: The root expression of the grammar.
        buffer: The input, advanced past the consumed text on success.
        listener: The listener notified about the evaluation, the logging
            listener if None.

    Returns:
        The syntax tree if the grammar matched, the mismatch otherwise.
    """
    result = grammar.evaluate(buffer.remaining, listener)
    if isinstance(result, Mismatch):
        return result
    buffer.commit(result)
    return result.node


class Parser:
    """Parses strings with a grammar, as configured by the configuration."""

    _logger = logging.getLogger(__name__)

    def __init__(self, grammar: Expression) -> None:
        """Create a new parser.

        Args:
            grammar: The root expression of the grammar.
        """
        self._grammar = grammar

    @property
    def grammar(self) -> Expression:
        """Provides the grammar of the parser.

        Returns:
            The root expression of the grammar.
        """
        return self._grammar

    def parse_string(self, text: str) -> SyntaxNode:
        """Parse a string.

        Args:
            text: The text to parse.

        Returns:
            The syntax tree of the matched text.

        Raises:
            ParseError: If the grammar does not match the text, or does not
                match all of it while a full match is required.
        """
        buffer = InputBuffer(text)
        result = self.parse_buffer(buffer)
        if isinstance(result, Mismatch):
            raise ParseError(result)
        return result

    def parse_buffer(self, buffer: InputBuffer) -> SyntaxNode | Mismatch:
        """Parse the front of a buffer.

        Args:
            buffer: The input, advanced past the consumed text on success.

        Returns:
            The syntax tree if the grammar matched, the mismatch otherwise.
        """
        parsing = config.configuration.parsing
        listener = LOGGING_LISTENER if parsing.trace else NULL_LISTENER

        result = self._grammar.evaluate(buffer.remaining, listener)
        if isinstance(result, Mismatch):
            self._logger.info("%s did not match: %s", self._grammar, result.message)
            return result

        if parsing.require_full_match and result.remaining:
            mismatch = UnconsumedInput(result)
            self._logger.info("%s", mismatch.message)
            return mismatch

        buffer.commit(result)
        self._logger.info(
            "%s matched %d characters", self._grammar, len(result.consumed)
        )
        return result.node
