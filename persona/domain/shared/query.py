"""Query and QueryHandler base classes."""

from typing import TypeVar

from pydantic import BaseModel

from persona.domain.shared.handler import Handler, Result

__all__ = ["Query", "QueryHandler", "Result"]


class Query(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Handler[Q, R]):
    """Base class for read-only handlers."""
