"""Shared test fixtures."""

from __future__ import annotations

import json
import sys
import types
from pathlib import Path

import pytest


@pytest.fixture
def sample_resume() -> dict:
    return {
        "$schema": "https://raw.githubusercontent.com/jsonresume/resume-schema/v1.0.0/schema.json",
        "basics": {
            "name": "Ada Lovelace",
            "label": "Analyst",
            "email": "ada@analytical.org",
            "url": "https://example.com",
            "summary": "Writes programs for engines that do not exist yet.",
            "location": {"city": "London", "countryCode": "GB"},
            "profiles": [
                {"network": "GitHub", "username": "ada", "url": "https://github.com/ada"}
            ],
        },
        "work": [
            {
                "name": "Analytical Engine Co.",
                "position": "Programmer",
                "startDate": "1842-07",
                "highlights": ["Published the first algorithm"],
            }
        ],
        "education": [
            {
                "institution": "Home tutoring",
                "area": "Mathematics",
                "studyType": "Private",
                "startDate": "1830",
                "endDate": "1835",
            }
        ],
        "skills": [{"name": "Mathematics", "keywords": ["Bernoulli numbers"]}],
    }


@pytest.fixture
def resume_file(tmp_path: Path, sample_resume: dict) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_resume), encoding="utf-8")
    return path


@pytest.fixture
def invalid_resume_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"basics": {"label": "No name"}}), encoding="utf-8")
    return path


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty working directory."""
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.chdir(out)
    return out


@pytest.fixture
def fake_theme(monkeypatch):
    """Install an importable theme module and return it."""

    def install(name: str, render):
        module = types.ModuleType(name)
        module.__doc__ = "Fake theme for tests."
        module.render = render
        monkeypatch.setitem(sys.modules, name, module)
        return module

    return install
