#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade (or downgrade) to a revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from photoshare.config import Settings
from photoshare.util.logging import setup_logging
from photoshare.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    try:
        with logfire.span("run_migrations", target=target):
            script = ScriptDirectory.from_config(alembic_cfg)
            heads = script.get_heads()

            if target == "head" or target in heads:
                command.upgrade(alembic_cfg, target)
            else:
                # Anything that isn't a head is treated as a rollback target
                command.downgrade(alembic_cfg, target)

        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the container rather than start against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
