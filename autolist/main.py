"""Vehicles service FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from autolist.adapters.inbound.http.car_routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Autolist Vehicles API",
    description="CRUD over vehicle listings enriched with location and price data",
    version="0.1.0",
)

app.include_router(router)
