import re
import logging
from pathlib import Path
from typing import Optional

from .errors import ConfigError

_WORD_RE = re.compile(r'[A-Za-z0-9]+')
_INVALID_PATH_CHARS = re.compile(r'[<>:"\'`/\\|?*&\s]')


def to_component_name(name: str, fallback: str = "Component") -> str:
    """Turn a Figma layer name into a PascalCase identifier.

    Variant names such as ``State=Hover, Size=Small`` keep only the property
    values, so the result is ``HoverSmall``.
    """
    words = []
    for segment in name.split(','):
        if '=' in segment:
            segment = segment.split('=', 1)[1]
        words.extend(_WORD_RE.findall(segment))

    identifier = ''.join(word[:1].upper() + word[1:] for word in words)

    if not identifier:
        return fallback
    if identifier[0].isdigit():
        identifier = f"Svg{identifier}"

    return identifier


def sanitize_folder_name(name: str, fallback: str = "ComponentSet") -> str:
    """Turn a layer name into a single safe directory name.

    Separators, quotes and whitespace become ``_``; leading and trailing dots
    are dropped so ``.`` and ``..`` can never leave the output directory.
    """
    sanitized = _INVALID_PATH_CHARS.sub('_', name)
    sanitized = re.sub(r'_+', '_', sanitized).strip('_.')

    if not sanitized:
        sanitized = fallback

    return sanitized


def setup_logging(log_level: str = 'INFO', log_file: Optional[str] = None):
    """Setup logging configuration"""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level '{log_level}'")

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler()]

    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )
