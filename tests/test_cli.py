"""Tests for the mindmap-opml command line tool."""

import mindmap_opml
from mindmap_opml.cli import main

SAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<opml version="2.0">
  <head><title>Garden</title><ownerName>Ada</ownerName></head>
  <body>
    <outline _position_x="1.0" text="Vegetables">
      <outline text="Tomatoes"/>
      <outline text="Beans"/>
    </outline>
    <outline text="Flowers"/>
  </body>
</opml>
"""


def write_sample(tmp_path):
    path = tmp_path / "garden.opml"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_info(tmp_path, capsys):
    path = write_sample(tmp_path)
    assert main(["info", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Title: Garden" in out
    assert "Owner: Ada" in out
    assert "Outlines: 4" in out
    assert "• Vegetables (2 items)" in out


def test_tree_depth(tmp_path, capsys):
    path = write_sample(tmp_path)
    assert main(["tree", str(path), "--depth", "0"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Vegetables", "Flowers"]


def test_find(tmp_path, capsys):
    path = write_sample(tmp_path)
    assert main(["find", str(path), "bean"]) == 0
    assert capsys.readouterr().out.strip() == "Vegetables → Beans"


def test_format_to_file(tmp_path, capsys):
    path = write_sample(tmp_path)
    out_path = tmp_path / "formatted.opml"
    assert main(["format", str(path), "-o", str(out_path)]) == 0
    expected = mindmap_opml.generate(mindmap_opml.read(path))
    assert out_path.read_text(encoding="utf-8") == expected
    assert '<outline text="Vegetables" _position_x="1.0">' in expected


def test_format_stdout(tmp_path, capsys):
    path = write_sample(tmp_path)
    assert main(["format", str(path)]) == 0
    assert capsys.readouterr().out.startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_errors(tmp_path, capsys):
    broken = tmp_path / "broken.opml"
    broken.write_text("<opml><head>", encoding="utf-8")
    assert main(["info", str(broken)]) == 1
    assert "OPML parsing failed" in capsys.readouterr().err

    assert main(["tree", str(tmp_path / "missing.opml")]) == 1
    assert "File not found" in capsys.readouterr().err
