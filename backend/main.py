# backend/main.py
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, get_settings, validate_settings
from models.credentials import Err
from routes import heygen_routes, realtime_routes
from utils.logger import setup_logging, get_logger

setup_logging()
log = get_logger(__name__)
settings = get_settings()

app = FastAPI(
    title="AI Interviewer Token Relay",
    version="1.0.0",
    description="Short-lived credentials for OpenAI Realtime and HeyGen streaming avatars"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(realtime_routes.router)
app.include_router(heygen_routes.router)


@app.on_event("startup")
async def startup_event():
    """Refuse to serve without the OpenAI key; warn about HeyGen"""
    check = validate_settings(get_settings())
    if isinstance(check, Err):
        log.error(f"❌ {check.detail}")
        raise RuntimeError(check.detail)

    log.info("🚀 Starting AI Interviewer Token Relay v1.0.0")

    if not get_settings().heygen_api_key:
        log.warning("⚠️ HEYGEN_API_KEY is not set – /api/heygen-token will fail until you add it to .env")


@app.get("/")
async def root():
    return {
        "message": "AI Interviewer Token Relay v1.0.0",
        "status": "operational",
        "endpoints": [
            "POST /api/realtime-token",
            "POST /api/heygen-token",
        ],
        "docs": "/docs"
    }


@app.get("/health")
async def health_check(current: Settings = Depends(get_settings)):
    """Health check"""
    return {
        "status": "healthy",
        "version": "1.0.0",
        "services": {
            "openai_realtime": bool(current.openai_api_key),
            "heygen": bool(current.heygen_api_key),
        }
    }


def run():
    import uvicorn

    check = validate_settings(settings)
    if isinstance(check, Err):
        raise SystemExit(check.detail)

    log.info(f"API server listening on port {settings.port}")
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
