"""Command line tests."""

import json

import pytest

from gridforge.cli import main

from .test_importer import BASALT_SOURCE

BUTTON_SOURCE = """\
local basalt = require("basalt")
local main = basalt.createFrame()
main:setSize(26, 20)
local ok = main:addButton():setPosition(2, 2):setText("OK")
basalt.run()
"""


@pytest.fixture
def lua_file(tmp_path):
    path = tmp_path / "inventory.lua"
    path.write_text(BASALT_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def button_file(tmp_path):
    path = tmp_path / "button.lua"
    path.write_text(BUTTON_SOURCE, encoding="utf-8")
    return path


@pytest.mark.unit
def test_presets(capsys):
    assert main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "computer" in out
    assert "51x19" in out


@pytest.mark.unit
def test_import_writes_interchange(lua_file, tmp_path):
    out = tmp_path / "design.json"
    assert main(["import", str(lua_file), "-o", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["targetDialect"] == "basalt"
    assert [w["typeName"] for w in data["widgets"]] == ["Label", "List"]


@pytest.mark.unit
def test_export_to_other_dialect(button_file, capsys):
    assert main(["export", str(button_file), "--target", "pixelui", "--no-comments"]) == 0
    out = capsys.readouterr().out
    assert "local app = pixelui.create({width = 26, height = 20})" in out
    assert "local element1 = app.button({x = 2, y = 2, width = 8, height = 3, text = 'OK'" in out


@pytest.mark.unit
def test_export_project_name(lua_file, capsys):
    assert main(["export", str(lua_file), "-t", "project", "--name", "Inventory"]) == 0
    assert json.loads(capsys.readouterr().out)["name"] == "Inventory"


@pytest.mark.unit
def test_export_xml_layout(button_file, tmp_path):
    out = tmp_path / "layout.xml"
    assert main(["export", str(button_file), "-t", "xml", "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert '<Frame width="26" height="20">' in text
    assert "<Button " in text


@pytest.mark.unit
def test_unrecognized_input(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("just some notes", encoding="utf-8")
    assert main(["import", str(path)]) == 1
    assert "error:" in capsys.readouterr().err


@pytest.mark.unit
def test_missing_file(tmp_path):
    assert main(["import", str(tmp_path / "absent.lua")]) == 1
