# tests/conftest.py
import os
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

# Keep tests independent of a developer's .env
os.environ.setdefault("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from main import app
from poketeam.models.pokemon import Pokemon
from poketeam.services.pokeapi_client import PokemonDataClient
from poketeam.services.pokemon_service import PokemonService
from poketeam.services.team_store import InMemoryTeamStore
from poketeam.state import init_services

# Dummy catalog returned by the mocked data client
MOCK_POKEMON_LIST = [
    Pokemon(id="1", name="Bulbasaur"),
    Pokemon(id="2", name="Ivysaur"),
    Pokemon(id="3", name="Venusaur"),
]

FULL_TEAM = [
    Pokemon(id="1", name="Bulbasaur"),
    Pokemon(id="2", name="Ivysaur"),
    Pokemon(id="3", name="Venusaur"),
    Pokemon(id="4", name="Charmander"),
    Pokemon(id="5", name="Charmeleon"),
    Pokemon(id="6", name="Charizard"),
]


@pytest.fixture
def mock_data_client():
    data_client = AsyncMock(spec=PokemonDataClient)
    data_client.get_pokemon_list.return_value = MOCK_POKEMON_LIST
    return data_client

@pytest.fixture
def team_store():
    return InMemoryTeamStore()

@pytest.fixture
def pokemon_service(mock_data_client, team_store):
    return PokemonService(mock_data_client, team_store)

@pytest.fixture
def client(mock_data_client, team_store):
    init_services(app, client=mock_data_client, store=team_store)
    with TestClient(app) as c:
        yield c

    # Restore the default wiring after the test
    init_services(app)

@pytest.fixture
def pokemon_catalog():
    return list(MOCK_POKEMON_LIST)

@pytest.fixture
def full_team():
    return list(FULL_TEAM)
