import logging
from pathlib import Path
from typing import Callable, Dict

from .components import Component
from .errors import WriteError

logger = logging.getLogger(__name__)

ExportTemplate = Callable[[str], str]

INDEX_FILENAME = 'index.ts'


def default_export_template(path: str) -> str:
    return f"export * from './{path}'"


def format_source(text: str) -> str:
    """Strip trailing whitespace and end the file with exactly one newline"""
    lines = [line.rstrip() for line in text.splitlines()]
    return '\n'.join(lines).strip('\n') + '\n'


def write_file(path: Path, content: str) -> Path:
    path = Path(path)
    try:
        # Several components may share a folder, creation has to be idempotent
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise WriteError(path, e) from e

    logger.debug(f"Wrote {path}")
    return path


def write_index(components: Dict[str, Component], result_dir: Path,
                export_template: ExportTemplate = default_export_template) -> Path:
    """Write the barrel file with one export per component, in mapping order"""
    exports = [export_template(component.path) for component in components.values()]
    return write_file(Path(result_dir) / INDEX_FILENAME, format_source('\n'.join(exports)))
