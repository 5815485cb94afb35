from fastapi import APIRouter, Depends
from poketeam.models.pokemon import Pokemon
from poketeam.schemas.team import TeamOut, ToggleResult
from poketeam.services.pokemon_service import PokemonService, MAX_TEAM_SIZE
from poketeam.state import get_pokemon_service
from poketeam.utils.session import get_user_id

router = APIRouter()


def build_team_out(service: PokemonService, user_id: str) -> TeamOut:
    members = service.get_user_team(user_id)
    return TeamOut(
        userId=user_id,
        members=members,
        size=len(members),
        maxSize=MAX_TEAM_SIZE,
        isFull=len(members) >= MAX_TEAM_SIZE
    )

@router.get("", response_model=TeamOut)
async def get_team(
    user_id: str = Depends(get_user_id),
    service: PokemonService = Depends(get_pokemon_service)
):
    return build_team_out(service, user_id)

@router.post("/toggle", response_model=ToggleResult)
async def toggle_team_member(
    pokemon: Pokemon,
    user_id: str = Depends(get_user_id),
    service: PokemonService = Depends(get_pokemon_service)
):
    was_member = service.is_in_team(user_id, pokemon.id)
    success = service.toggle_pokemon_in_team(user_id, pokemon)

    if not success:
        action = "rejected"
    elif was_member:
        action = "removed"
    else:
        action = "added"

    return ToggleResult(
        success=success,
        action=action,
        team=build_team_out(service, user_id)
    )

@router.delete("", response_model=TeamOut)
async def clear_team(
    user_id: str = Depends(get_user_id),
    service: PokemonService = Depends(get_pokemon_service)
):
    service.clear_team(user_id)
    return build_team_out(service, user_id)
