"""Tests for resume loading and schema validation."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from resume_maker.resume import loader
from resume_maker.resume.loader import SchemaIssue, load_resume, validate_resume
from resume_maker.resume.models import Resume
from resume_maker.shared import ResumeIOError, ResumeParseError, ResumeValidationError


class TestResumeModel:
    def test_minimal_resume(self):
        resume = Resume.model_validate({"basics": {"name": "Ada"}})
        assert resume.basics.name == "Ada"
        assert resume.work == []

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Resume.model_validate({"basics": {}})

    def test_extra_properties_allowed(self, sample_resume):
        sample_resume["basics"]["pronouns"] = "she/her"
        sample_resume["custom"] = {"anything": True}
        resume = Resume.model_validate(sample_resume)
        assert resume.basics.name == "Ada Lovelace"

    @pytest.mark.parametrize("date", ["2020", "2020-01", "2020-01-31"])
    def test_accepts_iso8601_dates(self, date):
        Resume.model_validate({"basics": {"name": "A"}, "work": [{"startDate": date}]})

    @pytest.mark.parametrize("date", ["Jan 2020", "20-01", "2020/01/01"])
    def test_rejects_other_dates(self, date):
        with pytest.raises(ValidationError):
            Resume.model_validate({"basics": {"name": "A"}, "work": [{"startDate": date}]})

    @pytest.mark.parametrize(
        "doc",
        [
            {"basics": {"name": "A", "label": None}},
            {"basics": {"name": "A"}, "work": [{"name": "Acme", "position": None}]},
            {"basics": {"name": "A"}, "awards": [{"title": None, "awarder": "X"}]},
            {"basics": {"name": "A"}, "meta": None},
        ],
    )
    def test_rejects_null_fields(self, doc):
        with pytest.raises(ValidationError, match="null is not allowed"):
            Resume.model_validate(doc)

    def test_null_in_extra_property_allowed(self):
        Resume.model_validate({"basics": {"name": "A", "x-custom": None}})

    @pytest.mark.parametrize(
        "url", ["https://example.com", "mailto:ada@analytical.org", "ftp://files.example.com/cv.pdf"]
    )
    def test_accepts_any_uri_scheme(self, url):
        resume = Resume.model_validate({"basics": {"name": "A", "url": url}})
        assert str(resume.basics.url).startswith(url.split(":")[0])

    def test_rejects_empty_url(self):
        with pytest.raises(ValidationError):
            Resume.model_validate({"basics": {"name": "A", "url": ""}})


class TestValidateResume:
    def test_valid_file_has_no_issues(self, resume_file):
        assert validate_resume(resume_file) == []

    def test_reports_missing_name(self, invalid_resume_file):
        issues = validate_resume(invalid_resume_file)
        assert issues
        assert issues[0].location == "basics -> name"

    def test_reports_bad_email(self, tmp_path, sample_resume):
        sample_resume["basics"]["email"] = "not-an-email"
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(sample_resume))

        issues = validate_resume(path)
        assert [i.location for i in issues] == ["basics -> email"]

    def test_null_field_is_a_schema_issue(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps({"basics": {"name": "Ada"}, "work": [{"position": None}]}))

        issues = validate_resume(path)
        assert [i.location for i in issues] == ["work -> 0 -> position"]
        assert "null is not allowed" in issues[0].message

    def test_yaml_resume(self, tmp_path):
        path = tmp_path / "resume.yaml"
        path.write_text("basics:\n  name: Ada\nskills:\n  - name: Math\n")
        assert validate_resume(path) == []

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text("{not json")
        with pytest.raises(ResumeParseError):
            validate_resume(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text("[1, 2]")
        with pytest.raises(ResumeParseError):
            validate_resume(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResumeIOError, match="file not found"):
            validate_resume(tmp_path / "nope.json")

    def test_issue_str(self):
        assert str(SchemaIssue("basics -> name", "Field required")) == (
            "basics -> name: Field required"
        )


class TestLoadResume:
    def test_returns_raw_document(self, resume_file, sample_resume):
        assert load_resume(resume_file) == sample_resume

    def test_reads_the_supplied_path(self, tmp_path, workdir, sample_resume):
        # a resume.json in the working directory must not be picked up instead
        (workdir / "resume.json").write_text(json.dumps({"basics": {"name": "Wrong"}}))
        path = tmp_path / "cv.json"
        path.write_text(json.dumps(sample_resume))

        assert load_resume(path)["basics"]["name"] == "Ada Lovelace"

    def test_invalid_resume_raises_validation_error(self, invalid_resume_file):
        with pytest.raises(ResumeValidationError) as exc_info:
            load_resume(invalid_resume_file)

        err = exc_info.value
        assert str(err) == (
            f"{invalid_resume_file} is not a valid resume.json file by the jsonresume schema"
        )
        assert err.issues
        assert err.exit_code == 3

    def test_invalid_resume_is_not_parsed_for_rendering(self, invalid_resume_file):
        with patch.object(loader, "_parse", wraps=loader._parse) as parse:
            with pytest.raises(ResumeValidationError):
                load_resume(invalid_resume_file)

        # only the validator's own read
        assert parse.call_count == 1
