#  This file is part of combparse.
#
#  SPDX-FileCopyrightText: 2024 combparse Contributors
#
#  SPDX-License-Identifier: MIT
#
"""Provides the version of combparse."""

__version__ = "0.1.0"
