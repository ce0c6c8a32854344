"""
Figma document tree handling

Locates the requested page inside the file tree and turns its COMPONENT
nodes into the ordered component mapping every later step works from.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import DuplicateNameError, PageNotFoundError
from .utils import sanitize_folder_name, to_component_name

logger = logging.getLogger(__name__)

COMPONENT = 'COMPONENT'
COMPONENT_SET = 'COMPONENT_SET'


@dataclass
class DocumentNode:
    id: str
    name: str
    type: str
    children: List['DocumentNode'] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'DocumentNode':
        return cls(
            id=data.get('id', ''),
            name=data.get('name', ''),
            type=data.get('type', ''),
            children=[cls.from_dict(child) for child in data.get('children', [])],
        )


@dataclass(frozen=True)
class Component:
    id: str
    name: str
    folder: Optional[str] = None

    @property
    def path(self) -> str:
        """Output path relative to the result directory, without extension"""
        if self.folder:
            return f"{self.folder}/{self.name}"
        return self.name


def find_page(children: List[DocumentNode], page_id: str) -> DocumentNode:
    """Breadth-first search for ``page_id``; the shallowest match wins."""
    frontier = list(children)

    while frontier:
        for node in frontier:
            if node.id == page_id:
                return node
        frontier = [child for node in frontier for child in node.children]

    raise PageNotFoundError(page_id)


def parse_components(page: DocumentNode) -> Dict[str, Component]:
    """Collect COMPONENT nodes of ``page`` in document order.

    Components inside a COMPONENT_SET get the sanitized set name as their
    folder and the set name as a prefix of their own name. Two components exporting
    to the same path raise ``DuplicateNameError``.
    """
    components: Dict[str, Component] = {}
    paths: Dict[str, str] = {}

    def visit(node: DocumentNode, container: Optional[DocumentNode]):
        if node.type == COMPONENT_SET:
            for child in node.children:
                visit(child, node)
            return

        if node.type == COMPONENT:
            component = _to_component(node, container)
            # Icon.svg and ICON.svg are the same file on case-insensitive filesystems
            key = component.path.casefold()
            if key in paths:
                raise DuplicateNameError(component.path, [paths[key], component.id])
            paths[key] = component.id
            components[component.id] = component
            return

        for child in node.children:
            visit(child, container)

    for child in page.children:
        visit(child, None)

    logger.debug(f"Found {len(components)} components on page {page.id}")
    return components


def _to_component(node: DocumentNode, container: Optional[DocumentNode]) -> Component:
    if container is None:
        return Component(id=node.id, name=to_component_name(node.name))

    name = to_component_name(container.name, fallback="") + to_component_name(node.name)
    return Component(id=node.id, name=name, folder=sanitize_folder_name(container.name))
