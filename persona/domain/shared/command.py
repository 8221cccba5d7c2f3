"""Command and CommandHandler base classes."""

from typing import TypeVar

from pydantic import BaseModel

from persona.domain.shared.handler import Handler, Result

__all__ = ["Command", "CommandHandler", "Result"]


class Command(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Handler[C, R]):
    """Base class for handlers that mutate catalog state."""
