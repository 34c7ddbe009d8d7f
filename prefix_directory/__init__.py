"""In-memory search autocomplete and phone directory package."""

from .api import PrefixDirectoryAPI, build_api
from .autocomplete import AutocompleteSystem
from .directory import EXHAUSTED, PhoneDirectory
from .models import AutocompleteConfig, PrefixDirectoryConfig
from .service_http import create_app

__all__ = [
    "EXHAUSTED",
    "AutocompleteConfig",
    "AutocompleteSystem",
    "PhoneDirectory",
    "PrefixDirectoryAPI",
    "PrefixDirectoryConfig",
    "build_api",
    "create_app",
]

__version__ = "0.1.0"
