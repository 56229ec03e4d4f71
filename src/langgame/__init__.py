"""
langgame - guess the language from a handful of its words.
"""

from importlib.metadata import PackageNotFoundError, version as _get_version

from .catalog import Catalog, LanguageEntry, load_all_languages
from .server import GameServer

try:
    __version__ = _get_version("langgame")
except PackageNotFoundError:
    # Running from a source checkout; pyproject.toml holds the real version
    __version__ = "0+unknown"
__all__ = ["Catalog", "LanguageEntry", "GameServer", "load_all_languages"]
