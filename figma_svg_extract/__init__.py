"""
figma-svg-extract: export Figma components as optimized SVG files and
React wrappers.
"""

__version__ = "1.0.0"

from .components import Component, DocumentNode, find_page, parse_components
from .config import ExtractConfig, Settings
from .errors import (
    ConfigError,
    DuplicateNameError,
    FigmaSvgExtractError,
    MissingImageUrlError,
    PageNotFoundError,
    RemoteApiError,
    RemoteFetchError,
    WriteError,
)
from .extractor import extract_svg_from_figma, log_progress
from .figma_client import FigmaClient

__all__ = [
    "__version__",
    "Component",
    "DocumentNode",
    "find_page",
    "parse_components",
    "ExtractConfig",
    "Settings",
    "ConfigError",
    "DuplicateNameError",
    "FigmaSvgExtractError",
    "MissingImageUrlError",
    "PageNotFoundError",
    "RemoteApiError",
    "RemoteFetchError",
    "WriteError",
    "extract_svg_from_figma",
    "log_progress",
    "FigmaClient",
]
