import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure environment variables are loaded at import time
from config import env  # noqa: F401
from config.ai_settings import load_ai_settings
from presentation.api import content_ai_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Content AI API", version="1.0.0")

allow_origins = [origin for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",") if origin]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(content_ai_router)


@app.get("/")
async def root():
    return {"message": "Content AI API"}


@app.get("/health")
async def health_check():
    # Reports configuration only; the provider is never called here
    settings = load_ai_settings()
    return {
        "status": "healthy",
        "model": settings.model_id,
        "provider_configured": bool(settings.api_key),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
