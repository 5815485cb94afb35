from fastapi import APIRouter, Depends
from typing import List
from poketeam.schemas.team import PokemonOut
from poketeam.services.pokemon_service import PokemonService
from poketeam.state import get_pokemon_service
from poketeam.utils.session import get_user_id

router = APIRouter()

@router.get("", response_model=List[PokemonOut])
async def list_pokemon(
    user_id: str = Depends(get_user_id),
    service: PokemonService = Depends(get_pokemon_service)
):
    # PokeApiClientError is turned into a 502 by ErrorHandlerMiddleware
    pokemon_list = await service.get_pokemon_list()
    team_ids = {member.id for member in service.get_user_team(user_id)}

    return [
        PokemonOut(id=pokemon.id, name=pokemon.name, inTeam=pokemon.id in team_ids)
        for pokemon in pokemon_list
    ]
