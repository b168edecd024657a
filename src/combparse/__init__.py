#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""combparse is a backtracking parser-combinator library.

A grammar is composed from terminals, sequences and ordered choices.  Parsing
an input with it either yields a syntax tree that mirrors the shape of the
grammar, or a mismatch that describes what was expected and what was seen.
"""
from combparse.__version__ import __version__
from combparse.exceptions import GrammarError
from combparse.exceptions import InvalidArity
from combparse.exceptions import InvalidTerminal
from combparse.exceptions import ParseError
from combparse.grammar.builders import ordered_choice_of
from combparse.grammar.builders import sequence_of
from combparse.grammar.expression import Epsilon
from combparse.grammar.expression import Expression
from combparse.grammar.expression import OrderedChoice
from combparse.grammar.expression import Sequence
from combparse.grammar.expression import Terminal
from combparse.grammar.result import Match
from combparse.grammar.result import Mismatch
from combparse.grammar.result import NoAlternativeMatched
from combparse.grammar.result import TerminalMismatch
from combparse.grammar.result import UnconsumedInput
from combparse.parser import InputBuffer
from combparse.parser import Parser
from combparse.parser import parse
from combparse.syntax.nodes import EpsilonNode
from combparse.syntax.nodes import OrderedChoiceNode
from combparse.syntax.nodes import SequenceNode
from combparse.syntax.nodes import SyntaxNode
from combparse.syntax.nodes import TerminalNode


__all__ = [
    "Epsilon",
    "EpsilonNode",
    "Expression",
    "GrammarError",
    "InputBuffer",
    "InvalidArity",
    "InvalidTerminal",
    "Match",
    "Mismatch",
    "NoAlternativeMatched",
    "OrderedChoice",
    "OrderedChoiceNode",
    "ParseError",
    "Parser",
    "Sequence",
    "SequenceNode",
    "SyntaxNode",
    "Terminal",
    "TerminalMismatch",
    "TerminalNode",
    "UnconsumedInput",
    "__version__",
    "ordered_choice_of",
    "parse",
    "sequence_of",
]
