# repository/base.py
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Persistence access for one entity type.

    Controllers depend only on this interface; the storage behind it is
    swapped out freely (sqlite in the app, mocks in tests).
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Return the entity with this id, or None if there is none."""

    @abstractmethod
    async def create(self, entity: T) -> None:
        """Persist a new entity."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Replace the stored entity that has the same id."""

    @abstractmethod
    async def delete(self, entity: Optional[T]) -> None:
        """Remove the stored entity."""
