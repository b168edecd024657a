#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the configuration of combparse.

The field docstrings double as help texts on the command line.
"""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class ParsingConfiguration:
    """Configuration of the configured parser."""

    require_full_match: bool = False
    """Report a mismatch if input is left after the grammar matched."""

    trace: bool = True
    """Write every evaluation step to the log on the debug level."""


@dataclasses.dataclass
class Configuration:
    """General configuration of combparse."""

    parsing: ParsingConfiguration = dataclasses.field(
        default_factory=ParsingConfiguration
    )
    """Configuration of the parser."""


# Singleton instance of the configuration.
configuration = Configuration()
