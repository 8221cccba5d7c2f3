"""Handler base shared by commands and queries, with the ``__auth__`` gate.

Every concrete handler is turned into a dataclass (so DI can build it from
its annotated fields) and its ``run()`` is wrapped so the declared gate is
evaluated before any domain code executes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

from persona.domain.shared.model.value import CamelModel

if TYPE_CHECKING:
    from persona.domain.shared.authorization.gate import Gate

logger = logging.getLogger("persona.authz")


class Result(CamelModel):
    """Base for handler results. Serialized with camelCase keys."""


I = TypeVar("I", bound=BaseModel)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, input) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def _wrap_run_with_gate(original_run: _HandlerMethod) -> _HandlerMethod:
    @wraps(original_run)
    async def gated_run(self: Any, inp: Any) -> Any:
        from persona.domain.auth.model.principal import Principal
        from persona.domain.shared.authorization.gate import Authenticated, Gate, Public
        from persona.domain.shared.error import AuthenticationError, ConfigurationError

        gate = getattr(type(self), "__auth__", None)
        if not isinstance(gate, Gate):
            raise ConfigurationError(f"Handler {type(self).__name__} has no __auth__ declaration")

        if isinstance(gate, Public):
            return await original_run(self, inp)

        if isinstance(gate, Authenticated):
            principal = getattr(self, "principal", None)
            if not isinstance(principal, Principal):
                raise AuthenticationError("Access token required", code="missing_token")
            logger.debug("Gate passed: handler=%s, user_id=%s", type(self).__name__, principal.user_id)
            return await original_run(self, inp)

        raise ConfigurationError(  # pragma: no cover
            f"Handler {type(self).__name__} has unhandled __auth__ type: {type(gate).__name__}"
        )

    return gated_run


@dataclass_transform()
class Handler(ABC, Generic[I, R]):
    """Base for command and query handlers. Subclasses are automatically dataclasses.

    Concrete handlers must declare a gate:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = authenticated()
            principal: Principal
    """

    __auth__: ClassVar[Gate]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        dataclass(cls)
        run = cls.__dict__.get("run")
        if run is not None and not getattr(run, "__isabstractmethod__", False):
            cls.run = _wrap_run_with_gate(run)  # type: ignore[method-assign]

    @abstractmethod
    async def run(self, inp: I) -> R: ...


def concrete_handlers(base: type[Handler] = Handler) -> list[type[Handler]]:
    """All non-abstract handler classes defined so far, depth first."""
    found: list[type[Handler]] = []
    for sub in base.__subclasses__():
        if "run" in sub.__dict__ and not getattr(sub.run, "__isabstractmethod__", False):
            found.append(sub)
        found.extend(concrete_handlers(sub))
    return found
