#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py                      # upgrade to head
    python scripts/run_migrations.py upgrade <revision>
    python scripts/run_migrations.py downgrade <revision>
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from topmeup.config import Settings
from topmeup.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    direction = argv[0] if argv else "upgrade"
    if direction not in ("upgrade", "downgrade"):
        logfire.error("Unknown migration direction", direction=direction)
        return 2
    if direction == "downgrade" and len(argv) < 2:
        logfire.error("Downgrade needs a target revision")
        return 2
    target = argv[1] if len(argv) > 1 else "head"

    config = Config(str(ALEMBIC_INI))
    with logfire.span("run_migrations", direction=direction, target=target):
        try:
            if direction == "downgrade":
                command.downgrade(config, target)
            else:
                command.upgrade(config, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Database migrations applied", direction=direction, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
