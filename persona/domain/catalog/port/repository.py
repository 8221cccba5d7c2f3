from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol

from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.value import TraitId
from persona.domain.catalog.search.filters import TraitFilters
from persona.domain.catalog.search.sorting import OrderTerm
from persona.domain.shared.port import Port


class TraitRepository(Port, Protocol):
    @abstractmethod
    async def get(self, trait_id: TraitId) -> Trait | None: ...

    @abstractmethod
    async def create(self, trait: Trait) -> None: ...

    @abstractmethod
    async def update(self, trait: Trait) -> None:
        """Overwrite the stored row. Last write wins; there is no version check."""
        ...

    @abstractmethod
    async def delete(self, trait_id: TraitId) -> bool: ...

    @abstractmethod
    async def find(
        self,
        filters: TraitFilters,
        order: Sequence[OrderTerm],
        *,
        limit: int,
        offset: int,
    ) -> tuple[list[Trait], int]:
        """One page of matching traits plus the total match count."""
        ...
