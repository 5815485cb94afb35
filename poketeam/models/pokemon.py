from pydantic import BaseModel, ConfigDict


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # PokeAPI id as a string, e.g. "25"
    name: str  # Display name, e.g. "Pikachu"
