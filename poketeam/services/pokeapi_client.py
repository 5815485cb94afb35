import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import aiohttp

from poketeam import config
from poketeam.models.pokemon import Pokemon

logger = logging.getLogger(__name__)


class PokeApiClientError(Exception):
    """Raised when the Pokémon catalog cannot be fetched or parsed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class PokemonDataClient(ABC):
    """Asynchronous source of the Pokémon catalog."""

    @abstractmethod
    async def get_pokemon_list(self) -> List[Pokemon]:
        ...


def parse_pokemon_entry(entry: dict) -> Pokemon:
    """
    Convert one PokeAPI list entry into a Pokemon.

    Args:
        entry: {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"}

    Returns:
        Pokemon(id="1", name="Bulbasaur")
    """
    segments = [s for s in entry["url"].split("/") if s]
    if not segments:
        raise ValueError(f"No id in url {entry['url']!r}")
    name = entry["name"]
    return Pokemon(id=segments[-1], name=name[:1].upper() + name[1:])


class PokeApiClient(PokemonDataClient):
    """Fetches the Pokémon list from PokeAPI's /pokemon endpoint."""

    def __init__(
        self,
        base_url: str = config.POKEAPI_BASE_URL,
        limit: int = config.POKEAPI_LIMIT,
        offset: int = config.POKEAPI_OFFSET,
        timeout: float = config.POKEAPI_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self.offset = offset
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client opened it"""
        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
            self._session = None

    async def get_pokemon_list(self) -> List[Pokemon]:
        url = f"{self.base_url}/pokemon"
        params = {"limit": self.limit, "offset": self.offset}
        session = self._get_session()

        try:
            async with session.get(url, params=params, timeout=self.timeout) as response:
                if response.status != 200:
                    logger.warning("PokeAPI returned status %s for %s", response.status, url)
                    raise PokeApiClientError(
                        f"PokeAPI returned status {response.status}",
                        status=response.status,
                    )
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("PokeAPI request to %s failed: %s", url, e)
            raise PokeApiClientError(f"PokeAPI request failed: {e}") from e
        except ValueError as e:
            logger.warning("PokeAPI returned invalid JSON from %s: %s", url, e)
            raise PokeApiClientError(f"Malformed PokeAPI payload: {e}") from e

        try:
            pokemon_list = [parse_pokemon_entry(entry) for entry in data["results"]]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Malformed PokeAPI payload from %s: %s", url, e)
            raise PokeApiClientError(f"Malformed PokeAPI payload: {e}") from e

        logger.debug("Fetched %d Pokémon from PokeAPI", len(pokemon_list))
        return pokemon_list
