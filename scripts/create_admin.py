#!/usr/bin/env python3
"""Create an admin account in the configured database.

Usage:
    python scripts/create_admin.py <username> [--email EMAIL] [--role admin|moderator]

The password is read interactively (or from ADMIN_PASSWORD) and stored hashed.
"""

import argparse
import asyncio
import getpass
import os
import sys

from records_api.config import get_settings
from records_api.core.domain_types import AdminRole, enum_values
from records_api.core.errors import RecordApiError
from records_api.infrastructure.database import close_db, init_db
from records_api.infrastructure.observability import setup_logging
from records_api.infrastructure.record_store import RecordStore
from records_api.services.admin_accounts import create_admin


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an admin account.")
    parser.add_argument("username")
    parser.add_argument("--email", default=None)
    parser.add_argument(
        "--role", default=AdminRole.ADMIN.value, choices=enum_values(AdminRole),
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")

    password = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Password: ")

    manager = init_db(settings.database_url)
    try:
        if settings.database_create_schema:
            await manager.create_schema()
        async with manager.session() as session:
            account = await create_admin(
                RecordStore(session), args.username, password,
                email=args.email, role=AdminRole(args.role),
            )
    except RecordApiError as e:
        print(f"Failed to create admin: {e.message}", file=sys.stderr)
        return 1
    finally:
        await close_db()

    print(f"Created {account.role} '{account.username}' ({account.id})")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
