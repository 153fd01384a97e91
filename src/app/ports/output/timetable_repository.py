from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import TimetableTables


class ITimetableRepository(ABC):
    """Port for loading the raw trip and station tables."""

    @abstractmethod
    def load_tables(self) -> TimetableTables:
        raise NotImplementedError
