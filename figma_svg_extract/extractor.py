"""
Extraction pipeline

fetch tree -> locate page -> extract components -> fetch SVG URLs
-> per component (fetch source -> optimize -> write) -> write index

Any error aborts the run; files written before the failure are left in place.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .components import Component, find_page, parse_components
from .config import ExtractConfig
from .errors import MissingImageUrlError
from .figma_client import FigmaClient
from .svg_optimizer import optimize_svg
from .svg_to_jsx import convert_svg_to_jsx
from .writer import format_source, write_file, write_index

logger = logging.getLogger(__name__)

FETCHING_TREE = 'fetching_tree'
LOCATING_PAGE = 'locating_page'
EXTRACTING_COMPONENTS = 'extracting_components'
FETCHING_IMAGE_URLS = 'fetching_image_urls'
FETCHING_SOURCE = 'fetching_source'
POST_PROCESSING = 'post_processing'
WRITING_FILES = 'writing_files'
COMPONENT_DONE = 'component_done'
WRITING_INDEX = 'writing_index'
DONE = 'done'

ProgressObserver = Callable[[str, Optional[Component]], None]

_MESSAGES = {
    FETCHING_TREE: "❯ Fetch components from figma",
    LOCATING_PAGE: "❯ Locate page",
    EXTRACTING_COMPONENTS: "❯ Extract components",
    FETCHING_IMAGE_URLS: "❯ Fetch SVG urls",
    WRITING_INDEX: "❯ Write index",
    DONE: "✅ Extraction finished",
}


def log_progress(phase: str, component: Optional[Component] = None) -> None:
    """Default observer: announce phases on the module logger"""
    if phase == COMPONENT_DONE:
        logger.info(f"❯ Component fetched and created: {component.path}")
    elif component is not None:
        logger.debug(f"  {phase}: {component.path}")
    elif phase in _MESSAGES:
        logger.info(_MESSAGES[phase])


def extract_svg_from_figma(result_dir, config: ExtractConfig,
                           client: Optional[FigmaClient] = None,
                           observer: ProgressObserver = log_progress) -> List[Path]:
    """Run the whole export into ``result_dir`` and return the written paths"""
    result_dir = Path(result_dir)
    client = client or FigmaClient(config.token)

    observer(FETCHING_TREE, None)
    document = client.fetch_tree(config.file, config.page)

    observer(LOCATING_PAGE, None)
    page = find_page(document.children, config.page)

    observer(EXTRACTING_COMPONENTS, None)
    components = parse_components(page)

    if not components:
        logger.info(f"No components found on page {config.page}")
        observer(DONE, None)
        return []

    observer(FETCHING_IMAGE_URLS, None)
    urls = client.fetch_image_urls(components.keys(), config.file)
    missing = [component_id for component_id in components if not urls.get(component_id)]
    if missing:
        raise MissingImageUrlError(missing)

    written = _export_components(components, urls, result_dir, config, client, observer)

    if config.writes_tsx:
        observer(WRITING_INDEX, None)
        written.append(write_index(components, result_dir, config.export_template))

    observer(DONE, None)
    return written


def _export_components(components: Dict[str, Component], urls: Dict[str, str],
                       result_dir: Path, config: ExtractConfig, client: FigmaClient,
                       observer: ProgressObserver) -> List[Path]:
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        futures = [
            executor.submit(_export_component, component, urls[component.id],
                            result_dir, config, client, observer)
            for component in components.values()
        ]
        try:
            # Results are collected in extraction order, whatever order they finish in
            results = [future.result() for future in futures]
        except Exception:
            for future in futures:
                future.cancel()
            raise

    return [path for paths in results for path in paths]


def _export_component(component: Component, url: str, result_dir: Path,
                      config: ExtractConfig, client: FigmaClient,
                      observer: ProgressObserver) -> List[Path]:
    observer(FETCHING_SOURCE, component)
    source = client.fetch_raw_source(url)

    observer(POST_PROCESSING, component)
    source = optimize_svg(source, preserve_colors=config.preserve_colors,
                          non_square=config.non_square)

    observer(WRITING_FILES, component)
    target = result_dir / component.path
    written = []
    if config.writes_tsx:
        jsx = convert_svg_to_jsx(source, component, config)
        written.append(write_file(target.with_name(f"{component.name}.tsx"), format_source(jsx)))
    if config.writes_svg:
        written.append(write_file(target.with_name(f"{component.name}.svg"), source))

    observer(COMPONENT_DONE, component)
    return written
