"""FastAPI app entry point for the Rogue Trader rules engine."""

import logging
import random

from fastapi import FastAPI

from api.actors import router as actors_router
from api.rolls import router as rolls_router
from api.tables import router as tables_router
from config import DICE_SEED, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Rogue Trader Engine",
    description="Stateless d100 rules engine for Rogue Trader character sheets",
    version="0.1.0",
)

# A fixed seed makes every roll reproducible across restarts
app.state.rng = random.Random(int(DICE_SEED)) if DICE_SEED else None

app.include_router(tables_router, prefix="/tables", tags=["Tables"])
app.include_router(actors_router, prefix="/actors", tags=["Actors"])
app.include_router(rolls_router, prefix="/rolls", tags=["Rolls"])


@app.get("/")
def root() -> dict:
    """Root endpoint returning server info."""
    return {"name": "Rogue Trader Engine", "version": "0.1.0", "status": "running"}


@app.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"healthy": True}
