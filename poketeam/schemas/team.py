from pydantic import BaseModel
from typing import List, Literal
from poketeam.models.pokemon import Pokemon


class PokemonOut(BaseModel):
    id: str
    name: str
    inTeam: bool = False

class TeamOut(BaseModel):
    userId: str
    members: List[Pokemon]
    size: int
    maxSize: int
    isFull: bool

class ToggleResult(BaseModel):
    success: bool
    action: Literal["added", "removed", "rejected"]
    team: TeamOut
