"""
File and index writing
"""
from unittest.mock import patch

import pytest

from figma_svg_extract.components import Component
from figma_svg_extract.errors import WriteError
from figma_svg_extract.writer import format_source, write_file, write_index


def test_write_file_creates_parents(tmp_path):
    target = tmp_path / "Button" / "ButtonDefault.svg"
    assert write_file(target, "<svg/>") == target
    assert target.read_text(encoding="utf-8") == "<svg/>"


def test_write_file_existing_folder(tmp_path):
    (tmp_path / "Button").mkdir()
    write_file(tmp_path / "Button" / "a.svg", "a")
    write_file(tmp_path / "Button" / "b.svg", "b")
    assert sorted(p.name for p in (tmp_path / "Button").iterdir()) == ["a.svg", "b.svg"]


def test_write_file_failure_raises_write_error(tmp_path):
    with patch("builtins.open", side_effect=PermissionError("denied")):
        with pytest.raises(WriteError) as exc:
            write_file(tmp_path / "a.svg", "a")
    assert exc.value.path == tmp_path / "a.svg"


def test_format_source():
    assert format_source("a  \n\nb\t\n\n\n") == "a\n\nb\n"


def test_index_single_icon(tmp_path):
    path = write_index({"1": Component(id="1", name="Icon")}, tmp_path)
    assert path == tmp_path / "index.ts"
    assert path.read_text(encoding="utf-8") == "export * from './Icon'\n"


def test_index_order_and_folders(tmp_path):
    components = {
        "5": Component(id="5", name="Zeta"),
        "11": Component(id="11", name="ButtonDefault", folder="Button"),
        "2": Component(id="2", name="Alpha"),
    }
    write_index(components, tmp_path)
    assert (tmp_path / "index.ts").read_text(encoding="utf-8").splitlines() == [
        "export * from './Zeta'",
        "export * from './Button/ButtonDefault'",
        "export * from './Alpha'",
    ]


def test_index_custom_template(tmp_path):
    write_index({"1": Component(id="1", name="Icon")}, tmp_path,
                lambda path: f"export {{ default as {path} }} from './{path}'")
    assert (tmp_path / "index.ts").read_text(encoding="utf-8") == "export { default as Icon } from './Icon'\n"
