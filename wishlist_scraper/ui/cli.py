from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict, List

from ..config import ScrapeConfig
from ..engines.base import ScrapeEngine, build_engine
from ..errors import ScrapeError
from ..utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Extract product details (title, price, image) from retailer URLs")
    p.add_argument("urls", nargs="*", help="Product URLs (space-separated); scheme optional")
    p.add_argument("--config", type=str, help="Path to config JSON", default=None)
    p.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default from config)")
    p.add_argument("--user-agent", type=str, default=None, help="User-Agent header to send")
    p.add_argument("--engine", type=str, default=None, help="Engine dotted path (module:ClassName)")
    p.add_argument("--extra-adapters", type=str, default=None,
                   help="Comma-separated dotted paths for additional adapters")
    p.add_argument("--log-level", type=str, default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("--serve", action="store_true", help="Run REST API server instead of scraping")
    p.add_argument("--host", type=str, default="127.0.0.1", help="API host (when --serve)")
    p.add_argument("--port", type=int, default=8000, help="API port (when --serve)")
    return p


def _load_config(args: argparse.Namespace) -> ScrapeConfig:
    if args.config:
        cfg = ScrapeConfig.from_file(args.config)
    else:
        cfg = ScrapeConfig.from_env()

    if args.timeout is not None:
        cfg.request_timeout = args.timeout
    if args.user_agent:
        cfg.user_agent = args.user_agent
    if args.engine:
        cfg.engine = args.engine
    if args.extra_adapters:
        cfg.extra_adapters = [a.strip() for a in args.extra_adapters.split(",") if a.strip()]

    cfg.validate()
    return cfg


def run_server(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("wishlist_scraper.apis.app:app", host=host, port=port)


async def _scrape_one(engine: ScrapeEngine, url: str) -> Dict[str, Any]:
    try:
        result = await engine.scrape(url)
    except ScrapeError as exc:
        logger.error("%s", exc)
        return {"url": url, "error": str(exc)}
    return {"url": url, "data": result.to_dict()}


async def scrape_all(engine: ScrapeEngine, urls: List[str]) -> List[Dict[str, Any]]:
    # Scrapes share nothing, so they can run side by side.
    return list(await asyncio.gather(*(_scrape_one(engine, u) for u in urls)))


def run_cli(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.serve:
        run_server(args.host, args.port)
        return 0

    if not args.urls:
        parser.error("at least one URL is required (or use --serve)")

    cfg = _load_config(args)
    engine = build_engine(cfg)

    outcomes = asyncio.run(scrape_all(engine, list(args.urls)))
    print(json.dumps(outcomes, indent=2, ensure_ascii=False))

    failed = sum(1 for o in outcomes if "error" in o)
    logger.info("Scraped: %s | Failed: %s", len(outcomes) - failed, failed)
    return 1 if failed else 0
