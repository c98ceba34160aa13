# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Country schemas."""

from src.schemas.common import CamelModel


class CountryResponse(CamelModel):
    """Schema for country response."""

    id: int
    code: str
    name: str
    flag_url: str | None
    available: bool
