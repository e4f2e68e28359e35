"""
Tests for pivotkarir.ml.nlp.profile_loader — ProfileLoader.
"""

import json

import pytest

from pivotkarir.ml.nlp import ProfileLoader
from pivotkarir.utils.exceptions import ParseError


@pytest.fixture
def loader():
    return ProfileLoader(max_file_size=1024, supported_formats=(".json",))


class TestLoadText:
    def test_valid_document(self, loader, full_profile_data):
        profile = loader.load_text(json.dumps(full_profile_data), "me.json")
        assert profile.name == "Dewi Lestari"
        assert profile.skills == ["python", "sql", "tableau"]

    def test_unknown_fields_ignored(self, loader):
        profile = loader.load_text('{"name": "Sari", "followers": 1200}', "r1.json")
        assert profile.name == "Sari"
        assert not hasattr(profile, "followers")

    def test_empty_object_is_valid(self, loader):
        profile = loader.load_text("{}", "empty.json")
        assert profile.is_empty

    def test_malformed_json_names_document(self, loader):
        with pytest.raises(ParseError) as exc_info:
            loader.load_text('{"name": "Sari",', "recruiter1.json")
        assert exc_info.value.source_name == "recruiter1.json"
        assert "recruiter1.json" in exc_info.value.message

    def test_non_object_rejected(self, loader):
        with pytest.raises(ParseError, match="expected a JSON object"):
            loader.load_text('["python", "sql"]', "list.json")

    @pytest.mark.parametrize(
        "document, expected",
        [
            ('{"skills": ["python", null]}', {"skills": ["python"]}),
            ('{"skills": ["python", true]}', {"skills": ["python", "true"]}),
            ('{"specialization": [{"area": "tech"}, "data"]}', {"specialization": ["data"]}),
            ('{"company": {"name": "Acme"}, "name": "Sari"}', {"company": None, "name": "Sari"}),
        ],
    )
    def test_loosely_typed_values_load(self, loader, document, expected):
        profile = loader.load_text(document, "r.json")
        for field_name, value in expected.items():
            assert getattr(profile, field_name) == value

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, loader, token):
        with pytest.raises(ParseError, match=token) as exc_info:
            loader.load_text(f'{{"bio": {token}}}', "r.json")
        assert exc_info.value.source_name == "r.json"

    def test_parse_error_chains_cause(self, loader):
        with pytest.raises(ParseError) as exc_info:
            loader.load_text("not json", "bad.json")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


class TestLoadBytes:
    def test_utf8(self, loader):
        profile = loader.load_bytes('{"name": "José"}'.encode("utf-8"), "a.json")
        assert profile.name == "José"

    def test_utf8_bom(self, loader):
        profile = loader.load_bytes('{"name": "Sari"}'.encode("utf-8-sig"), "a.json")
        assert profile.name == "Sari"

    def test_utf16_with_bom(self, loader):
        profile = loader.load_bytes('{"name": "Sari"}'.encode("utf-16"), "a.json")
        assert profile.name == "Sari"

    def test_latin1_fallback(self, loader):
        profile = loader.load_bytes('{"name": "José"}'.encode("latin-1"), "a.json")
        assert profile.name == "José"


class TestLoadFile:
    def test_reads_file(self, loader, tmp_path):
        path = tmp_path / "candidate.json"
        path.write_text('{"name": "Budi", "skills": ["go"]}', encoding="utf-8")
        profile = loader.load_file(path)
        assert profile.name == "Budi"
        assert profile.skills == ["go"]

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(ParseError, match="file not found"):
            loader.load_file(tmp_path / "nope.json")

    def test_directory_rejected(self, loader, tmp_path):
        folder = tmp_path / "folder.json"
        folder.mkdir()
        with pytest.raises(ParseError, match="not a file"):
            loader.load_file(folder)

    def test_unsupported_suffix(self, loader, tmp_path):
        path = tmp_path / "candidate.txt"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ParseError, match="unsupported format"):
            loader.load_file(path)

    def test_too_large(self, loader, tmp_path):
        path = tmp_path / "big.json"
        path.write_text(json.dumps({"bio": "x" * 2048}), encoding="utf-8")
        with pytest.raises(ParseError, match="too large"):
            loader.load_file(path)

    def test_error_uses_file_name(self, loader, tmp_path):
        path = tmp_path / "recruiter2.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ParseError) as exc_info:
            loader.load_file(path)
        assert exc_info.value.source_name == "recruiter2.json"
