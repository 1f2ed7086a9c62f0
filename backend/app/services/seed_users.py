"""Seed Users: inserts the demo users into a fresh database.

Invariants:
    - Inserts go through the user repository; the store enforces email uniqueness
    - Emails that already exist are skipped, not treated as failures
    - Running twice leaves the table unchanged the second time
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass, field

from app.config import get_settings
from app.core.errors import UniqueConstraintViolation
from app.core.repository_protocols import UserRepository
from app.db.user_repository import SqlAlchemyUserRepository
from app.infrastructure.database import init_db
from app.infrastructure.observability import setup_logging

DEMO_USERS: tuple[tuple[str, str], ...] = (
    ("Alice Johnson", "alice@example.com"),
    ("Bob Smith", "bob@example.com"),
    ("Charlie Davis", "charlie@example.com"),
)


@dataclass
class SeedReport:
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


async def seed_users(
    users: UserRepository,
    demo_users: tuple[tuple[str, str], ...] = DEMO_USERS,
) -> SeedReport:
    report = SeedReport()
    for name, email in demo_users:
        try:
            await users.insert_user(name, email)
        except UniqueConstraintViolation:
            report.skipped.append(email)
            continue
        report.created.append(email)
    return report


async def _run(database_url: str) -> SeedReport:
    db_manager = init_db(database_url)
    try:
        await db_manager.create_all()
        async with db_manager.session() as db:
            return await seed_users(SqlAlchemyUserRepository(db))
    finally:
        await db_manager.close()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the database with demo users")
    parser.add_argument(
        "--database-url",
        dest="database_url",
        default=None,
        help="Database URL (defaults to DATABASE_URL or the configured SQLite file)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    database_url = args.database_url or settings.database_url

    report = asyncio.run(_run(database_url))

    for email in report.created:
        print(f"Created {email}")
    for email in report.skipped:
        print(f"Skipped {email} (already exists)", file=sys.stderr)
    print(f"Seeded {len(report.created)} users, skipped {len(report.skipped)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
