"""Product metadata extraction for wishlist items: URL in, ExtractionResult out."""

from .version import __version__
from .errors import ScrapeError, InvalidUrlError, FetchError, ExtractionError
from .adapters.base import ExtractionResult
from .adapters.registry import AdapterRegistry, select_adapter
from .config import ScrapeConfig
from .engines.simple_engine import SimpleScrapeEngine, scrape
from .utils.parsing import normalize_url
from .utils.price import parse_price

__all__ = [
    "__version__",
    "ScrapeError",
    "InvalidUrlError",
    "FetchError",
    "ExtractionError",
    "ExtractionResult",
    "AdapterRegistry",
    "select_adapter",
    "ScrapeConfig",
    "SimpleScrapeEngine",
    "scrape",
    "normalize_url",
    "parse_price",
]
