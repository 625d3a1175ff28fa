"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import comparison, regions, scenarios
from src.config import settings

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title=settings.api_title,
    description="Buy vs rent net-worth projection",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(regions.router)
app.include_router(comparison.router)
app.include_router(scenarios.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
