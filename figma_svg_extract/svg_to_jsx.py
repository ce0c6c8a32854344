"""
SVG -> React component source

Converts optimized SVG markup into JSX and renders it through a component
template. Templates are plain functions ``(component, jsx) -> str``.
"""

import re
from typing import Callable

from .components import Component

ComponentTemplate = Callable[[Component, str], str]

ATTRIBUTE_RE = re.compile(r'(?<=\s)([A-Za-z_:][-A-Za-z0-9_:.]*)(?==")')
STYLE_ATTR_RE = re.compile(r'style="([^"]*)"')
ROOT_SVG_RE = re.compile(r'<svg\b')

# Attributes that keep their spelling in JSX
_KEEP_PREFIXES = ('data-', 'aria-')
_RENAMED = {
    'class': 'className',
    'for': 'htmlFor',
}


def jsx_attribute_name(name: str) -> str:
    if name in _RENAMED:
        return _RENAMED[name]
    if name.startswith(_KEEP_PREFIXES):
        return name
    return _camel_case(name)


def _camel_case(name: str) -> str:
    head, *rest = re.split(r'[-:]', name)
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def _style_to_object(match: 're.Match') -> str:
    declarations = []
    for declaration in match.group(1).split(';'):
        if ':' not in declaration:
            continue
        prop, value = declaration.split(':', 1)
        prop, value = prop.strip(), value.strip()
        if not prop.startswith('--'):
            prop = _camel_case(prop)
        value = value.replace("'", "\\'")
        declarations.append(f"{prop}: '{value}'")
    return 'style={{ ' + ', '.join(declarations) + ' }}'


def svg_to_jsx(source: str) -> str:
    """Rewrite SVG markup so it is valid JSX with ``props`` spread on the root"""
    jsx = STYLE_ATTR_RE.sub(_style_to_object, source)
    jsx = ATTRIBUTE_RE.sub(lambda match: jsx_attribute_name(match.group(1)), jsx)
    return ROOT_SVG_RE.sub('<svg {...props}', jsx, count=1)


def default_component_template(component: Component, jsx: str) -> str:
    return (
        "import type { SVGProps } from 'react'\n"
        "\n"
        f"export const {component.name} = (props: SVGProps<SVGSVGElement>) => (\n"
        f"  {jsx}\n"
        ")\n"
    )


def convert_svg_to_jsx(source: str, component: Component, config) -> str:
    """Render ``source`` as a React component using ``config.component_template``"""
    return config.component_template(component, svg_to_jsx(source))
