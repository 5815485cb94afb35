from typing import Optional
from fastapi import FastAPI, Request

from poketeam.services.pokeapi_client import PokeApiClient, PokemonDataClient
from poketeam.services.pokemon_service import PokemonService
from poketeam.services.team_store import InMemoryTeamStore, TeamStore


def init_services(
    app: FastAPI,
    client: Optional[PokemonDataClient] = None,
    store: Optional[TeamStore] = None
) -> PokemonService:
    """Create the data client, team store and service for this app instance"""
    if client is None:
        client = PokeApiClient()
    if store is None:
        store = InMemoryTeamStore()
    service = PokemonService(client, store)
    app.state.pokemon_client = client
    app.state.team_store = store
    app.state.pokemon_service = service
    return service

async def close_services(app: FastAPI) -> None:
    client = getattr(app.state, "pokemon_client", None)
    if isinstance(client, PokeApiClient):
        await client.close()

def get_pokemon_service(request: Request) -> PokemonService:
    return request.app.state.pokemon_service
