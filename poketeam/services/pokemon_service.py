from typing import List

from poketeam.models.pokemon import Pokemon
from poketeam.services.pokeapi_client import PokemonDataClient
from poketeam.services.team_store import TeamStore
from poketeam.utils.logger import log_event, log_error, EventTypes

MAX_TEAM_SIZE = 6


class PokemonService:
    """Catalog lookups and per-user team management"""

    def __init__(self, client: PokemonDataClient, store: TeamStore):
        self.client = client
        self.store = store

    async def get_pokemon_list(self) -> List[Pokemon]:
        """Fetch the catalog from the data client; failures propagate unchanged."""
        try:
            pokemon_list = await self.client.get_pokemon_list()
        except Exception as e:
            log_error("Failed to fetch Pokémon list", e)
            raise
        log_event(EventTypes.CATALOG_FETCHED, {"count": len(pokemon_list)})
        return pokemon_list

    def get_user_team(self, user_id: str) -> List[Pokemon]:
        return self.store.get(user_id)

    def is_in_team(self, user_id: str, pokemon_id: str) -> bool:
        return any(member.id == pokemon_id for member in self.store.get(user_id))

    def toggle_pokemon_in_team(self, user_id: str, pokemon: Pokemon) -> bool:
        """
        Remove the Pokémon if it is in the user's team, otherwise add it.

        Membership is matched by id only. Returns False only when the
        Pokémon is absent and the team already holds MAX_TEAM_SIZE members.
        """
        team = self.store.get(user_id)

        remaining = [member for member in team if member.id != pokemon.id]
        if len(remaining) != len(team):
            self.store.set(user_id, remaining)
            log_event(EventTypes.TEAM_POKEMON_REMOVED, {"pokemon_id": pokemon.id}, user_id=user_id)
            return True

        if len(team) >= MAX_TEAM_SIZE:
            log_event(EventTypes.TEAM_FULL_REJECTED, {"pokemon_id": pokemon.id}, user_id=user_id)
            return False

        team.append(pokemon)
        self.store.set(user_id, team)
        log_event(EventTypes.TEAM_POKEMON_ADDED, {"pokemon_id": pokemon.id}, user_id=user_id)
        return True

    def clear_team(self, user_id: str) -> None:
        self.store.clear(user_id)
        log_event(EventTypes.TEAM_CLEARED, user_id=user_id)
