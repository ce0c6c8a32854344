import os
import sys
import argparse
import importlib
import logging
from pathlib import Path
from dotenv import load_dotenv

from figma_svg_extract.config import FILTERS, Settings
from figma_svg_extract.errors import ConfigError, FigmaSvgExtractError
from figma_svg_extract.extractor import extract_svg_from_figma
from figma_svg_extract.figma_client import FigmaClient
from figma_svg_extract.utils import setup_logging


def load_template(spec: str):
    """Load a template function given as ``package.module:function``"""
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise ConfigError(f"Template must look like 'module:function', got '{spec}'")
    try:
        template = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f"Cannot load template '{spec}': {e}") from e
    if not callable(template):
        raise ConfigError(f"Template '{spec}' is not callable")
    return template


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Export Figma components as SVG files and React components')
    parser.add_argument('--file', help='Figma file key (defaults to FIGMA_FILE_KEY)')
    parser.add_argument('--page', help='Id of the page holding the components (defaults to FIGMA_PAGE_ID)')
    parser.add_argument('--output-dir', default='./icons', help='Directory the files are written to')
    parser.add_argument('--filter', choices=FILTERS, default='svg+tsx', help='Which files to generate')
    parser.add_argument('--preserve-colors', action='store_true', help='Keep fill/stroke colors instead of currentColor')
    parser.add_argument('--non-square', action='store_true', help='Only fix the height of non-square icons')
    parser.add_argument('--token', help='Figma personal access token (defaults to FIGMA_API_TOKEN)')
    parser.add_argument('--component-template', help='module:function rendering a component file')
    parser.add_argument('--export-template', help='module:function rendering an index export line')
    parser.add_argument('--max-workers', type=int, help='Maximum number of parallel downloads')
    parser.add_argument('--log-level', help='Logging level (defaults to LOG_LEVEL or INFO)')
    parser.add_argument('--log-file', help='Also write logs to this file')
    return parser


def main(argv=None):
    """Command line entry point"""

    # Load environment variables
    env_loaded = False
    if os.path.exists('.env'):
        load_dotenv('.env')
        env_loaded = True

    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = Settings()
        setup_logging(args.log_level or settings.log_level, args.log_file)
    except ConfigError as e:
        logger.error(f"❌ {e}")
        return 1

    if env_loaded:
        logger.info("Environment variables loaded successfully")

    settings.figma_token = args.token or settings.figma_token
    settings.file_key = args.file or settings.file_key
    settings.page_id = args.page or settings.page_id

    if not settings.validate():
        logger.error("Configuration validation failed. Check your arguments and environment variables.")
        return 1

    try:
        config = settings.to_extract_config(
            filter=args.filter,
            preserve_colors=args.preserve_colors,
            non_square=args.non_square,
            max_workers=args.max_workers,
            component_template=load_template(args.component_template) if args.component_template else None,
            export_template=load_template(args.export_template) if args.export_template else None,
        )

        output_dir = Path(args.output_dir)
        logger.info(f"🚀 Exporting page {config.page} of file {config.file}")
        logger.info(f"📁 Output directory: {output_dir}")
        logger.info(f"🎯 Filter: {config.filter}")

        client = FigmaClient(config.token, timeout=settings.request_timeout)
        written = extract_svg_from_figma(output_dir, config, client=client)
    except FigmaSvgExtractError as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info(f"✅ {len(written)} files written to {output_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
