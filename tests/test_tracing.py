#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
import logging

import pytest

from combparse.grammar.builders import ordered_choice_of
from combparse.grammar.builders import sequence_of
from combparse.grammar.expression import Terminal
from combparse.tracing import LoggingListener
from combparse.tracing import NullListener


@pytest.fixture()
def grammar():
    return sequence_of(
        Terminal("if"), ordered_choice_of(Terminal("["), Terminal("("))
    )


def test_logging_listener(grammar, caplog):
    with caplog.at_level(logging.DEBUG, logger="combparse.tracing"):
        grammar.evaluate("if(", LoggingListener())
    messages = caplog.messages
    assert messages[0] == 'evaluating ("if", ("[" | "(")) on "if("'
    assert 'calling expression 1 of ("[" | "("): "(" on "("' in messages
    assert '"[" failed: expected "[" but found "("' in messages
    assert messages[-1] == '("if", ("[" | "(")) consumed "if(", input left: ""'


def test_logging_listener_silent_above_debug(grammar, caplog):
    with caplog.at_level(logging.INFO, logger="combparse.tracing"):
        grammar.evaluate("if(", LoggingListener())
    assert caplog.records == []


def test_null_listener_does_not_change_result(grammar):
    assert grammar.evaluate("if(x", NullListener()) == grammar.evaluate(
        "if(x", LoggingListener()
    )
    assert grammar.evaluate("if{", NullListener()) == grammar.evaluate(
        "if{", LoggingListener()
    )


def test_listener_sees_every_attempt(grammar, listener):
    grammar.evaluate("if(", listener)
    choice = grammar.expressions[1]
    assert [call.args[1] for call in listener.before_child.call_args_list] == [
        0,
        1,
        0,
        1,
    ]
    assert listener.before_child.call_args_list[2].args[0] == choice
    assert listener.after_mismatch.call_count == 1
