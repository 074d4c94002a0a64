from __future__ import annotations

from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ScrapeConfig
from ..engines.base import build_engine
from ..errors import InvalidUrlError, ScrapeError
from ..version import __version__

logger = logging.getLogger(__name__)

app = FastAPI(title="wishlist_scraper API", version=__version__)


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


def get_config() -> ScrapeConfig:
    cfg = ScrapeConfig.from_env()
    cfg.validate()
    return cfg


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/scrape")
async def scrape_endpoint(req: ScrapeRequest) -> Any:
    # Callers authenticate upstream; this endpoint only maps pipeline outcomes.
    if not req.url:
        return JSONResponse(status_code=400, content={"error": "URL is required"})

    try:
        engine = build_engine(get_config())
        result = await engine.scrape(req.url)
    except InvalidUrlError as exc:
        return JSONResponse(status_code=400, content={"error": "Invalid URL format", "message": str(exc)})
    except (ScrapeError, ValueError, ImportError) as exc:
        # Also covers a bad SCRAPER_* environment or an unloadable engine path.
        logger.error("Error scraping URL %s: %s", req.url, exc)
        return JSONResponse(status_code=500, content={"error": "Failed to scrape URL", "message": str(exc)})

    return {"success": True, "data": result.to_dict()}
