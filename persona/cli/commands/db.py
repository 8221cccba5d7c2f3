"""Database schema commands (Alembic)."""

import sys

import cyclopts
from alembic.util import CommandError

from persona.cli.console import get_console
from persona.config import Config
from persona.infrastructure.persistence.migrate import current_revision, run_migrations

app = cyclopts.App(name="db", help="Database schema management")


@app.command
def upgrade(revision: str = "head") -> None:
    """Apply migrations up to REVISION.

    Args:
        revision: Target revision, ``head`` by default.
    """
    console = get_console()
    config = Config()
    try:
        run_migrations(config.database.url, revision)
    except CommandError as e:
        console.error(f"Migration failed: {e}")
        sys.exit(1)
    console.success(f"Database upgraded to {revision}")


@app.command
def current() -> None:
    """Show the database's current revision."""
    current_revision(Config().database.url)
