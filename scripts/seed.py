#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Populate the database with the default countries, providers and rates."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.database import SessionLocal, init_db  # noqa: E402
from src.services import auth_service, seed_service  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible sample rates",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (instead of running Alembic)",
    )
    parser.add_argument(
        "--with-admin",
        action="store_true",
        help="Also create the initial admin account if none exists",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.create_tables:
        init_db()

    db = SessionLocal()
    try:
        summary = seed_service.seed_all(db, random.Random(args.seed))
        if args.with_admin and not auth_service.has_admins(db):
            admin = auth_service.create_initial_admin(db)
            print(f"Created admin account: {admin.username}")
    finally:
        db.close()

    print(
        f"Seeding complete: {summary.countries} countries, "
        f"{summary.providers} providers, {summary.rates} rates added"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
