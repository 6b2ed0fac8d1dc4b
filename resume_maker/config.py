"""Render configuration.

Defaults describe the PDF export: A4 pages, background graphics on,
100px top/bottom and 50px left/right margins, content considered ready
once the DOM has been parsed. An optional YAML file can override them;
configuration is only ever read.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from resume_maker.shared import ConfigError


DEFAULT_CONFIG_FILE = "resume-maker.yaml"

PaperFormat = Literal[
    "Letter", "Legal", "Tabloid", "Ledger", "A0", "A1", "A2", "A3", "A4", "A5", "A6"
]
WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


class PdfConfig(BaseModel):
    """Options passed to the browser's PDF export."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: PaperFormat = "A4"
    print_background: StrictBool = True
    wait_until: WaitUntil = "domcontentloaded"
    margin_top: StrictStr = "100px"
    margin_right: StrictStr = "50px"
    margin_bottom: StrictStr = "100px"
    margin_left: StrictStr = "50px"

    @property
    def margin(self) -> dict[str, str]:
        return {
            "top": self.margin_top,
            "right": self.margin_right,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
        }


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    pdf: PdfConfig = Field(default_factory=PdfConfig)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{' -> '.join(str(x) for x in e['loc']) or '<root>'}: {e['msg']}"
        for e in error.errors()
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, falling back to defaults.

    An explicit ``path`` must exist. Without one, ``resume-maker.yaml`` in
    the working directory is used when present.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
    else:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not config_path.is_file():
            return AppConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: top level must be a mapping")

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"{config_path}: {_describe(e)}") from e
