# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class AdminRole(str, Enum):
    """Back-office role enumeration.

    Only ADMIN may manage providers; the editor roles are limited to rates.
    """

    ADMIN = "admin"
    EDITOR = "editor"
    RATE_EDITOR = "rate_editor"


class FeeType(str, Enum):
    """How a provider charges for a transfer."""

    FIXED = "Fixed fee"
    VARIABLE = "Variable fee"
    NONE = "No fee"
    FIRST_TRANSFER = "First transfer"  # Free first transfer promotion
