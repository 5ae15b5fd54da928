"""
Abstract base class for tournament data sources.

A source provides the two inputs of a simulation run: the groups with
their teams and rankings, and the exhibition history.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..simulator.models import Exhibitions, Groups


class TournamentSource(ABC):
    """Abstract base class for tournament data sources."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the source kind (e.g., 'file', 'http')."""
        pass

    @abstractmethod
    async def fetch_groups(self) -> Groups:
        """
        Fetch the group draw.

        Returns:
            Dict mapping group label -> ordered teams

        Raises:
            SourceNotFoundError: If the document doesn't exist
            SourceError: If the document can't be read or is invalid
        """
        pass

    @abstractmethod
    async def fetch_exhibitions(self) -> Exhibitions:
        """
        Fetch the exhibition history.

        Returns:
            Dict mapping team code -> exhibition matches

        Raises:
            SourceNotFoundError: If the document doesn't exist
            SourceError: If the document can't be read or is invalid
        """
        pass

    async def fetch_all(self) -> Tuple[Groups, Exhibitions]:
        """Fetch groups and exhibitions."""
        groups = await self.fetch_groups()
        exhibitions = await self.fetch_exhibitions()
        return groups, exhibitions
