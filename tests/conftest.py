#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
from unittest.mock import MagicMock

import pytest

import combparse.configuration as config

from combparse.grammar.expression import Terminal
from combparse.tracing import EvaluationListener


@pytest.fixture(autouse=True)
def reset_configuration():
    config.configuration = config.Configuration()


@pytest.fixture()
def listener() -> MagicMock:
    return MagicMock(spec=EvaluationListener)


@pytest.fixture()
def spy_terminal():
    def create(literal: str) -> MagicMock:
        return MagicMock(wraps=Terminal(literal))

    return create
