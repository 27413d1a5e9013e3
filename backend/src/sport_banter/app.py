import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .route import router as banter_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Comma-separated list, e.g. "https://bantz.example,http://localhost:3000"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("SPORT_BANTER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

app = FastAPI(
    title="Sport Banter API",
    description="Witty sports replies grounded in recent TheSportsDB results",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(banter_router)


@app.get("/")
async def root():
    return {
        "service": "sport-banter",
        "endpoints": ["/api/banter", "/api/banter/rate-limit", "/health"],
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
