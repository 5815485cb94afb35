from dotenv import load_dotenv
load_dotenv() # Load .env file before any settings are read

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from poketeam import config
from poketeam.state import init_services, close_services
from poketeam.routes import health, pokemon, team
from poketeam.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Pokémon Team Builder API",
    description="Browse the Pokémon catalog and build a team of up to six",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

@app.on_event("shutdown")
async def shutdown_event():
    """Close the PokeAPI session on shutdown"""
    await close_services(app)
    logger.info("Application shutdown completed")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Added after CORS so errors get CORS headers
app.add_middleware(ErrorHandlerMiddleware)
register_exception_handlers(app)

# One client, store and service per app instance
init_services(app)

app.include_router(health.router, tags=["Health"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to the Pokémon Team Builder API",
        "docs": "/docs",
        "health": "/health"
    }

app.include_router(pokemon.router, prefix="/api/pokemon", tags=["Pokémon"])
app.include_router(team.router, prefix="/api/team", tags=["Team"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
