"""Main CLI application using Cyclopts."""

import cyclopts

from persona.cli.commands import categories, db, server, token

app = cyclopts.App(
    name="persona",
    help="Persona trait catalog - CLI",
)

app.command(server.app, name="server")
app.command(db.app, name="db")
app.command(token.app, name="token")
app.command(categories.app, name="categories")


def main() -> None:
    app()
