#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""combparse is a backtracking parser-combinator library.

This module provides a small command line front end: it composes the given
literals to a sequence or an ordered choice, parses a text with it and prints the
resulting syntax tree.
"""
from __future__ import annotations

import logging
import sys

from argparse import ArgumentParser
from typing import TYPE_CHECKING

import simple_parsing

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

import combparse.configuration as config

from combparse.__version__ import __version__
from combparse.exceptions import GrammarError
from combparse.grammar.builders import ordered_choice_of
from combparse.grammar.builders import sequence_of
from combparse.grammar.expression import Terminal
from combparse.grammar.formatter import quote
from combparse.grammar.result import Mismatch
from combparse.parser import InputBuffer
from combparse.parser import Parser
from combparse.syntax.render import render_syntax_tree


if TYPE_CHECKING:
    from combparse.grammar.expression import Expression


_MODES = {
    "sequence": sequence_of,
    "choice": ordered_choice_of,
}


def _create_argument_parser() -> ArgumentParser:
    parser = simple_parsing.ArgumentParser(
        add_option_string_dash_variants=simple_parsing.DashVariant.UNDERSCORE_AND_DASH,
        description="Parse a text with a grammar composed of literals",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verbosity",
        default=0,
        help="verbose output (repeat for increased verbosity)",
    )
    parser.add_argument(
        "--no-rich",
        "--no_rich",
        dest="no_rich",
        action="store_true",
        default=False,
        help="Don't use rich for nicer console output.",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(_MODES),
        default="sequence",
        help="How the literals are composed",
    )
    parser.add_argument(
        "--literals",
        metavar="literal",
        type=str,
        nargs="+",
        required=True,
        help="The literals the grammar is composed of",
    )
    parser.add_argument(
        "--text",
        type=str,
        required=True,
        help="The text to parse",
    )
    parser.add_arguments(config.Configuration, dest="config")

    return parser


def _setup_logging(verbosity: int, no_rich: bool) -> Console:  # noqa: FBT001
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    if verbosity >= 2:
        level = logging.DEBUG

    if no_rich:
        console = Console(no_color=True, highlight=False)
        handler: logging.Handler = logging.StreamHandler()
    else:
        install()
        console = Console(tab_size=4)
        handler = RichHandler(
            rich_tracebacks=True, log_time_format="[%X]", console=console
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s]"
        "(%(name)s:%(funcName)s:%(lineno)d): %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    return console


def main(argv: list[str] | None = None) -> int:
    """Entry point for the command line interface of combparse.

    The return value `0` signals that the grammar matched the text, `1` that it
    did not match, and `2` that the grammar could not be constructed.

    Args:
        argv: List of command-line arguments

    Returns:
        An integer representing the outcome of the run.
    """
    if argv is None:
        argv = sys.argv

    parsed = _create_argument_parser().parse_args(argv[1:])
    console = _setup_logging(parsed.verbosity, parsed.no_rich)
    config.configuration = parsed.config

    try:
        terminals = [Terminal(literal) for literal in parsed.literals]
        grammar: Expression = (
            terminals[0] if len(terminals) == 1 else _MODES[parsed.mode](*terminals)
        )
    except GrammarError:
        logging.exception("Could not construct the grammar")
        return 2

    buffer = InputBuffer(parsed.text)
    result = Parser(grammar).parse_buffer(buffer)
    if isinstance(result, Mismatch):
        console.print(f"No match for {grammar}:", markup=False)
        console.print(result.message, markup=False, highlight=False)
        return 1

    console.print(render_syntax_tree(result))
    console.print(f"remaining: {quote(buffer.remaining)}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
