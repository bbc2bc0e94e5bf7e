"""
SolarSmart — FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solarsmart.api.router import router
from solarsmart.config import CORS_ORIGINS

app = FastAPI(
    title="SolarSmart API",
    description="Rooftop solar sizing, payback estimate and lead capture",
    version="0.1.0",
)

# CORS — allow local frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "solarsmart"}
