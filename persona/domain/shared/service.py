from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform()
class Service:
    """Base class for domain services. Subclasses are automatically dataclasses."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        dataclass(cls)
