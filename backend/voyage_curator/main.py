import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voyage_curator.config import settings

# ─── Logging setup (console + optional file) ───
_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
_handlers: list[logging.Handler] = [logging.StreamHandler()]

if settings.log_to_file:
    _LOG_DIR = Path(settings.log_dir)
    _LOG_DIR.mkdir(parents=True, exist_ok=True)
    _handlers.append(
        RotatingFileHandler(
            _LOG_DIR / "voyage_curator.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    )

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=_handlers,
)

# Quiet noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from voyage_curator.routers import plan

app = FastAPI(
    title=settings.app_name,
    description="Tailored Vacation Intelligence Agent",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plan.router, prefix="/api/plan", tags=["plan"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "voyage-curator"}
