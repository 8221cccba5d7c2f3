"""Tests for CLI commands."""

from uuid import uuid4

import jwt
import pytest

from persona.cli.commands import categories, token
from persona.cli.console import Console
from persona.infrastructure.persistence.migrate import to_sync_url


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> Console:
    monkeypatch.setenv("COLUMNS", "200")
    console = Console(force_terminal=False)
    monkeypatch.setattr(token, "get_console", lambda: console)
    monkeypatch.setattr(categories, "get_console", lambda: console)
    return console


class TestTokenCommand:
    def test_issues_token_for_user(self, console: Console, capsys, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PERSONA_AUTH__JWT__SECRET", "cli-test-secret-key-min-32-bytes!")
        user_id = uuid4()

        token.issue(user_id)

        printed = capsys.readouterr().out.strip()
        payload = jwt.decode(
            printed, "cli-test-secret-key-min-32-bytes!", algorithms=["HS256"], audience="authenticated"
        )
        assert payload["sub"] == str(user_id)

    def test_fails_without_secret(self, console: Console, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PERSONA_AUTH__JWT__SECRET", "")

        with pytest.raises(SystemExit):
            token.issue(uuid4())


class TestCategoriesCommand:
    def test_lists_every_category(self, console: Console, capsys):
        categories.show()

        out = capsys.readouterr().out
        assert "PUBLIC_SPEAKING" in out
        assert "Public Speaking" in out


class TestToSyncUrl:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("sqlite+aiosqlite:///persona.db", "sqlite:///persona.db"),
            ("postgresql+asyncpg://u:p@db/persona", "postgresql://u:p@db/persona"),
        ],
    )
    def test_drops_async_driver(self, url: str, expected: str):
        assert to_sync_url(url) == expected
