from .owner_reader import OwnerReader

__all__ = ["OwnerReader"]
