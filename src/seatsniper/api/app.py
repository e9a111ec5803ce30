"""FastAPI application."""

from fastapi import FastAPI

from seatsniper.api.routers import value
from seatsniper.config import get_settings

settings = get_settings()

app = FastAPI(
    title="seatsniper API",
    description="Resale ticket value scoring API",
    version="0.1.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Include routers
app.include_router(value.router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
