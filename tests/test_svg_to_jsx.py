"""
SVG -> React component conversion
"""
from types import SimpleNamespace

from figma_svg_extract.components import Component
from figma_svg_extract.svg_to_jsx import (
    convert_svg_to_jsx,
    default_component_template,
    jsx_attribute_name,
    svg_to_jsx,
)


def test_attribute_names():
    assert jsx_attribute_name("stroke-width") == "strokeWidth"
    assert jsx_attribute_name("fill-rule") == "fillRule"
    assert jsx_attribute_name("xlink:href") == "xlinkHref"
    assert jsx_attribute_name("class") == "className"
    assert jsx_attribute_name("viewBox") == "viewBox"
    assert jsx_attribute_name("data-name") == "data-name"
    assert jsx_attribute_name("aria-hidden") == "aria-hidden"


def test_props_spread_on_root_only():
    jsx = svg_to_jsx('<svg viewBox="0 0 1 1"><svg x="1"/></svg>')
    assert jsx == '<svg {...props} viewBox="0 0 1 1"><svg x="1"/></svg>'


def test_attributes_renamed_in_markup():
    jsx = svg_to_jsx('<svg><path fill-rule="evenodd" clip-rule="evenodd" class="a" d="M0 0"/></svg>')
    assert 'fillRule="evenodd"' in jsx
    assert 'clipRule="evenodd"' in jsx
    assert 'className="a"' in jsx
    assert 'd="M0 0"' in jsx


def test_style_becomes_object():
    jsx = svg_to_jsx('<svg><mask style="mask-type:luminance;opacity: 0.5"/></svg>')
    assert "style={{ maskType: 'luminance', opacity: '0.5' }}" in jsx


def test_default_template():
    source = default_component_template(Component(id="1", name="Icon"), "<svg {...props}/>")
    assert "import type { SVGProps } from 'react'" in source
    assert "export const Icon = (props: SVGProps<SVGSVGElement>) => (" in source
    assert "<svg {...props}/>" in source


def test_custom_template_is_used():
    config = SimpleNamespace(component_template=lambda component, jsx: f"{component.name}|{jsx}")
    result = convert_svg_to_jsx("<svg/>", Component(id="1", name="Star"), config)
    assert result == "Star|<svg {...props}/>"
