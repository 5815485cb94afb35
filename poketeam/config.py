import os

# PokeAPI
POKEAPI_BASE_URL = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
POKEAPI_LIMIT = int(os.getenv("POKEAPI_LIMIT", "151"))  # Gen 1 by default
POKEAPI_OFFSET = int(os.getenv("POKEAPI_OFFSET", "0"))
POKEAPI_TIMEOUT = float(os.getenv("POKEAPI_TIMEOUT", "10"))

# Web
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
USER_COOKIE_NAME = "user_id"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
