"""Pricing service FastAPI application entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from autolist.adapters.inbound.http.price_routes import router, seed_prices

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the price store on startup."""
    seed_prices()
    yield


app = FastAPI(
    title="Autolist Pricing Service",
    description="CRUD over vehicle prices",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
