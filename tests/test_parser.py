#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
import logging

import pytest

import combparse.configuration as config

from combparse.exceptions import ParseError
from combparse.grammar.builders import ordered_choice_of
from combparse.grammar.builders import sequence_of
from combparse.grammar.expression import Terminal
from combparse.grammar.result import NoAlternativeMatched
from combparse.grammar.result import TerminalMismatch
from combparse.grammar.result import UnconsumedInput
from combparse.parser import InputBuffer
from combparse.parser import Parser
from combparse.parser import parse
from combparse.syntax.nodes import SequenceNode
from combparse.syntax.nodes import TerminalNode


@pytest.fixture()
def if_grammar():
    return sequence_of(Terminal("if"), Terminal("("))


@pytest.fixture()
def boolean_grammar():
    return ordered_choice_of(Terminal("true"), Terminal("false"))


def test_input_buffer():
    buffer = InputBuffer("abc")
    assert buffer.remaining == "abc"
    assert buffer.offset == 0
    assert len(buffer) == 3
    assert str(buffer) == "abc"


def test_parse_advances_buffer(if_grammar):
    buffer = InputBuffer("if(x)")
    node = parse(if_grammar, buffer)
    assert node == SequenceNode("if(", (TerminalNode("if"), TerminalNode("(")))
    assert buffer.remaining == "x)"
    assert buffer.offset == 3


def test_parse_consecutive(boolean_grammar):
    buffer = InputBuffer("falsetrue")
    assert parse(boolean_grammar, buffer).text == "false"
    assert parse(boolean_grammar, buffer).text == "true"
    assert buffer.remaining == ""
    assert buffer.offset == 9


def test_parse_mismatch_leaves_buffer(if_grammar):
    buffer = InputBuffer("if x")
    result = parse(if_grammar, buffer)
    assert result == TerminalMismatch("(", " ", " x")
    assert buffer.remaining == "if x"
    assert buffer.offset == 0


def test_parse_boolean(boolean_grammar):
    buffer = InputBuffer("false")
    node = parse(boolean_grammar, buffer)
    assert node.text == "false"
    assert node.alternative == 1
    assert buffer.remaining == ""


def test_parse_passes_listener(if_grammar, listener):
    parse(if_grammar, InputBuffer("if("), listener)
    listener.before_evaluation.assert_any_call(if_grammar, "if(")


def test_parser_parse_string(if_grammar):
    node = Parser(if_grammar).parse_string("if(x)")
    assert node.text == "if("


def test_parser_parse_string_raises(boolean_grammar):
    with pytest.raises(ParseError) as error:
        Parser(boolean_grammar).parse_string("maybe")
    assert isinstance(error.value.mismatch, NoAlternativeMatched)
    assert str(error.value) == error.value.mismatch.message


def test_parser_require_full_match(if_grammar):
    config.configuration.parsing.require_full_match = True
    buffer = InputBuffer("if(x)")
    result = Parser(if_grammar).parse_buffer(buffer)
    assert isinstance(result, UnconsumedInput)
    assert result.message == 'matched "if(" but "x)" was left unconsumed'
    assert buffer.remaining == "if(x)"


def test_parser_require_full_match_complete_input(if_grammar):
    config.configuration.parsing.require_full_match = True
    assert Parser(if_grammar).parse_string("if(").text == "if("


def test_parser_trace(if_grammar, caplog):
    with caplog.at_level(logging.DEBUG):
        Parser(if_grammar).parse_string("if(")
    assert any(record.name == "combparse.tracing" for record in caplog.records)


def test_parser_without_trace(if_grammar, caplog):
    config.configuration.parsing.trace = False
    with caplog.at_level(logging.DEBUG):
        Parser(if_grammar).parse_string("if(")
    assert not any(record.name == "combparse.tracing" for record in caplog.records)
    assert any(record.name == "combparse.parser" for record in caplog.records)


def test_parser_grammar(if_grammar):
    assert Parser(if_grammar).grammar is if_grammar
