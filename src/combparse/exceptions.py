#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the exceptions raised by combparse."""
from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from combparse.grammar.result import Mismatch


class GrammarError(Exception):
    """Base class for errors detected while constructing a grammar."""


class InvalidTerminal(GrammarError):
    """Raised if a terminal is constructed from an invalid literal."""


class InvalidArity(GrammarError):
    """Raised if a combinator is constructed with too few expressions."""


class ParseError(Exception):
    """Raised by a configured parser if the input does not match the grammar."""

    def __init__(self, mismatch: Mismatch) -> None:
        """Create a new parse error.

        Args:
            mismatch: The mismatch describing why parsing failed.
        """
        super().__init__(mismatch.message)
        self.mismatch = mismatch
