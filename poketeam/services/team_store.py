from abc import ABC, abstractmethod
from typing import Dict, List

from poketeam.models.pokemon import Pokemon


class TeamStore(ABC):
    """Per-user team storage owned by the PokemonService."""

    @abstractmethod
    def get(self, user_id: str) -> List[Pokemon]:
        ...

    @abstractmethod
    def set(self, user_id: str, team: List[Pokemon]) -> None:
        ...

    @abstractmethod
    def clear(self, user_id: str) -> None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        """Number of users with a recorded team"""


class InMemoryTeamStore(TeamStore):
    """Dict-backed store; teams live as long as the store instance."""

    def __init__(self):
        self._teams: Dict[str, List[Pokemon]] = {}

    def get(self, user_id: str) -> List[Pokemon]:
        return list(self._teams.get(user_id, []))

    def set(self, user_id: str, team: List[Pokemon]) -> None:
        self._teams[user_id] = list(team)

    def clear(self, user_id: str) -> None:
        # Unknown users stay unrecorded
        if user_id in self._teams:
            self._teams[user_id] = []

    def __len__(self) -> int:
        return len(self._teams)
