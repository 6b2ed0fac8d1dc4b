"""Reading and validating resume files."""

import json
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from resume_maker.resume.models import Resume
from resume_maker.shared import ResumeIOError, ResumeParseError, ResumeValidationError


SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


@dataclass(frozen=True)
class SchemaIssue:
    """A single schema violation reported by the validator."""

    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ResumeIOError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResumeIOError(str(path), str(e)) from e


def _parse(path: Path, text: str) -> dict:
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResumeParseError(str(path), f"invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise ResumeParseError(str(path), f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ResumeParseError(str(path), "top level must be an object")
    return data


def validate_resume(path: str | Path) -> list[SchemaIssue]:
    """Check a resume file against the jsonresume schema.

    Returns the list of schema violations; an empty list means the file
    is valid.
    """
    path = Path(path)
    data = _parse(path, _read_text(path))

    try:
        Resume.model_validate(data)
    except ValidationError as e:
        return [
            SchemaIssue(
                location=" -> ".join(str(x) for x in error["loc"]) or "<root>",
                message=error["msg"],
            )
            for error in e.errors()
        ]
    return []


def load_resume(path: str | Path) -> dict:
    """Validate ``path`` and return its parsed contents.

    The validator runs first; the document is read for rendering only
    when it reports no issues.
    """
    issues = validate_resume(path)
    if issues:
        raise ResumeValidationError(str(path), issues)

    path = Path(path)
    return _parse(path, _read_text(path))
