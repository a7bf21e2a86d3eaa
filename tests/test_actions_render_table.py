"""
Tests for the render_table action.
"""

import sys
from pathlib import Path

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.render_table import main
from csvtable.config.settings import reset_settings
from csvtable.data.io import resolve_table_path


def write_sample(path: Path) -> Path:
    path.write_text("id,name\n1,ann\n2,bob\n")
    return path


def test_render_whole_table(tmp_path, capsys):
    path = write_sample(tmp_path / "people.csv")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[1] == "- id -- name -"
    assert "- 2 -- bob -" in out


def test_render_column(tmp_path, capsys):
    path = write_sample(tmp_path / "people.csv")

    assert main([str(path), "--column", "name"]) == 0
    assert capsys.readouterr().out == "ann\nbob\n"


def test_render_unknown_column(tmp_path, capsys):
    path = write_sample(tmp_path / "people.csv")

    assert main([str(path), "--column", "age"]) == 1
    assert "no column named 'age'" in capsys.readouterr().err


def test_render_row(tmp_path, capsys):
    path = write_sample(tmp_path / "people.csv")

    assert main([str(path), "--row", "1"]) == 0
    assert capsys.readouterr().out == "id: 2\nname: bob\n"

    assert main([str(path), "--row", "5"]) == 1


def test_render_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    assert main([str(path)]) == 1


def test_resolve_falls_back_to_data_dir(tmp_path, monkeypatch):
    write_sample(tmp_path / "people.csv")
    monkeypatch.chdir(tmp_path.parent)
    monkeypatch.setenv("CSVTABLE_DATA_DIR", str(tmp_path))
    reset_settings()

    assert resolve_table_path("people.csv", tmp_path) == tmp_path / "people.csv"
    assert main(["people.csv", "--column", "id"]) == 0
