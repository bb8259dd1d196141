"""Coffee Golf score parsing and tournament scoring."""

from importlib.metadata import PackageNotFoundError, version

from .parser import parse_score
from .scorecard import build_scorecard
from .standings import compute_standings

try:
    __version__ = version("coffee-golf")
except PackageNotFoundError:  # pragma: no cover - fallback during local dev
    __version__ = "0.0.0"

__all__ = ["__version__", "build_scorecard", "compute_standings", "parse_score"]
