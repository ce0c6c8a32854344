import os
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError
from .svg_to_jsx import ComponentTemplate, default_component_template
from .writer import ExportTemplate, default_export_template

logger = logging.getLogger(__name__)

FILTERS = ('svg', 'tsx', 'svg+tsx')


@dataclass(frozen=True)
class ExtractConfig:
    """Immutable configuration of a single extraction run"""

    token: str
    file: str
    page: str
    filter: str = 'svg+tsx'
    preserve_colors: bool = False
    non_square: bool = False
    component_template: ComponentTemplate = default_component_template
    export_template: ExportTemplate = default_export_template
    max_workers: Optional[int] = None

    def __post_init__(self):
        missing = [field for field in ('token', 'file', 'page') if not getattr(self, field)]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
        if self.filter not in FILTERS:
            raise ConfigError(f"Unknown filter '{self.filter}' (expected one of: {', '.join(FILTERS)})")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError("max_workers must be at least 1")

    @property
    def writes_svg(self) -> bool:
        return 'svg' in self.filter.split('+')

    @property
    def writes_tsx(self) -> bool:
        return 'tsx' in self.filter.split('+')


class Settings:
    """Configuration management using environment variables"""

    def __init__(self):
        # Figma configuration
        self.figma_token = os.getenv('FIGMA_API_TOKEN')
        self.file_key = os.getenv('FIGMA_FILE_KEY')
        self.page_id = os.getenv('FIGMA_PAGE_ID')

        # Optional configurations
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.request_timeout = _int_env('REQUEST_TIMEOUT', '30')
        self.max_workers = _int_env('MAX_WORKERS')

    def validate(self) -> bool:
        """Validate that required configuration is present"""
        required_vars = [
            ('FIGMA_API_TOKEN', self.figma_token),
            ('FIGMA_FILE_KEY', self.file_key),
            ('FIGMA_PAGE_ID', self.page_id),
        ]

        missing_vars = [var_name for var_name, var_value in required_vars if not var_value]

        if missing_vars:
            logger.error(f"Missing required settings: {', '.join(missing_vars)}")
            return False

        return True

    def to_extract_config(self, **overrides) -> ExtractConfig:
        values = {
            'token': self.figma_token,
            'file': self.file_key,
            'page': self.page_id,
            'max_workers': self.max_workers,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ExtractConfig(**values)


def _int_env(name: str, default: Optional[str] = None) -> Optional[int]:
    value = os.getenv(name) or default
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got '{value}'") from None
