"""
Tests for batch conversion and name files.
"""

import pytest

from check_keyword.config import Config
from check_keyword.core.status import KeywordStatus
from check_keyword.exceptions import NameFileError
from check_keyword.main import (
    ConversionResult,
    SafeName,
    convert_file,
    convert_names,
    read_names,
)
from check_keyword.rust.keywords import Edition


class TestSafeName:
    """Tests for SafeName."""

    def test_changed(self):
        name = SafeName("match", "r#match", KeywordStatus.strict(True))
        assert name.changed
        assert name.is_keyword

    def test_unchanged(self):
        name = SafeName("id", "id", KeywordStatus.not_keyword())
        assert not name.changed
        assert not name.is_keyword

    def test_to_dict(self):
        name = SafeName("self", "self_", KeywordStatus.strict(False))
        assert name.to_dict() == {
            "original": "self",
            "safe": "self_",
            "category": "strict",
            "is_keyword": True,
            "status": {"kind": "strict", "can_be_raw": False},
        }


class TestConvertNames:
    """Tests for convert_names."""

    def test_default_edition(self, schema_field_names):
        result = convert_names(schema_field_names)
        assert result.edition is Edition.E2018
        assert [n.safe for n in result.names] == [
            "id", "r#type", "self_", "name", "r#async", "union", "r#dyn", "r#try",
        ]

    def test_2015_edition(self, schema_field_names):
        result = convert_names(schema_field_names, Config(edition=Edition.E2015))
        assert [n.safe for n in result.names] == [
            "id", "r#type", "self_", "name", "async", "union", "r#dyn", "try",
        ]

    def test_preserves_order_and_duplicates(self):
        result = convert_names(["b", "match", "a", "match"])
        assert [n.original for n in result.names] == ["b", "match", "a", "match"]

    def test_accepts_generator(self):
        result = convert_names(name for name in ["fn", "x"])
        assert len(result.names) == 2

    def test_empty(self):
        result = convert_names([])
        assert result.names == []
        assert result.changed_names == []

    def test_changed_names(self, schema_field_names):
        result = convert_names(schema_field_names)
        assert [n.original for n in result.changed_names] == [
            "type", "self", "async", "dyn", "try",
        ]

    def test_count_by_category(self, schema_field_names):
        counts = convert_names(schema_field_names).count_by_category()
        assert counts == {
            "not_keyword": 2,
            "strict": 4,
            "reserved": 1,
            "weak": 1,
        }

    def test_count_by_category_includes_zero(self):
        counts = convert_names(["x"]).count_by_category()
        assert counts["weak"] == 0
        assert counts["not_keyword"] == 1

    def test_to_dict(self):
        data = convert_names(["match", "x"]).to_dict()
        assert data["edition"] == "2018"
        assert data["total"] == 2
        assert data["changed"] == 1
        assert data["names"][0]["safe"] == "r#match"


class TestReadNames:
    """Tests for reading name files."""

    def test_skips_comments_and_blanks(self, names_file):
        assert read_names(names_file) == ["id", "type", "self", "match"]

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(NameFileError) as exc_info:
            read_names(missing)
        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        with pytest.raises(NameFileError, match="not valid utf-8"):
            read_names(path)

    def test_lifetime_name_kept(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("'static\n")
        assert read_names(path) == ["'static"]

    def test_convert_file(self, names_file):
        result = convert_file(names_file)
        assert isinstance(result, ConversionResult)
        assert [n.safe for n in result.names] == ["id", "r#type", "self_", "r#match"]
