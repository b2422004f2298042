from abc import ABC, abstractmethod
from typing import Optional


class StorageBackend(ABC):
    """Key-value store holding suppression markers."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class MemoryStore(StorageBackend):
    """
    Process-local store. Lives as long as the process, which is
    the session lifetime for an embedded guard.
    """

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
