"""
Tests for conversion reports.
"""

import json

from check_keyword import __version__
from check_keyword.main import convert_names
from check_keyword.output.report import ConversionReport, format_name_line


class TestFormatNameLine:
    """Tests for single-line output."""

    def test_keyword_line(self):
        name = convert_names(["match"]).names[0]
        assert format_name_line(name) == "match -> r#match (strict)"

    def test_plain_line(self):
        name = convert_names(["id"]).names[0]
        assert format_name_line(name) == "id -> id (not_keyword)"


class TestConversionReport:
    """Tests for ConversionReport."""

    def test_lines(self):
        report = ConversionReport(convert_names(["self", "id"]))
        assert report.to_lines() == [
            "self -> self_ (strict)",
            "id -> id (not_keyword)",
        ]

    def test_changed_only(self):
        report = ConversionReport(convert_names(["self", "id"]), changed_only=True)
        assert report.to_lines() == ["self -> self_ (strict)"]

    def test_json(self):
        report = ConversionReport(convert_names(["self", "id", "union"]))
        data = json.loads(report.to_json())
        assert data["metadata"]["tool_version"] == __version__
        assert data["edition"] == "2018"
        assert data["total"] == 3
        assert data["changed"] == 1
        assert data["by_category"]["weak"] == 1
        assert [n["safe"] for n in data["names"]] == ["self_", "id", "union"]

    def test_json_changed_only_keeps_totals(self):
        report = ConversionReport(convert_names(["self", "id"]), changed_only=True)
        data = report.to_dict()
        assert data["total"] == 2
        assert data["metadata"]["changed_only"] is True
        assert [n["original"] for n in data["names"]] == ["self"]

    def test_text(self):
        text = ConversionReport(convert_names(["match", "id"])).to_text()
        assert "RUST KEYWORD REPORT" in text
        assert "Edition: 2018" in text
        assert "Total Names: 2" in text
        assert "Changed: 1" in text
        assert "STRICT: 1" in text
        assert "r#match" in text
        assert text.rstrip().endswith("=" * 70)

    def test_save(self, tmp_path):
        report = ConversionReport(convert_names(["fn"]))
        json_path = tmp_path / "report.json"
        text_path = tmp_path / "report.txt"
        report.save_json(json_path)
        report.save_text(text_path)
        assert json.loads(json_path.read_text())["names"][0]["safe"] == "r#fn"
        assert "r#fn" in text_path.read_text()
