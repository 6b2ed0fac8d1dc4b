"""Theme resolution.

A theme is any module (or object) exposing ``render(resume: dict)``
that returns an HTML string, either directly or as an awaitable.
Themes are looked up, in order, among the bundled themes, the
``resume_maker.themes`` entry-point group, and finally as an importable
module name.
"""

import importlib
from importlib.metadata import entry_points
from typing import Any

from resume_maker.shared import ThemeLoadError


ENTRY_POINT_GROUP = "resume_maker.themes"

_BUILTIN_THEMES: dict[str, str] = {
    "basic": "resume_maker.themes.basic",
}


def register_theme(name: str, module_path: str) -> None:
    """Register a theme module under a short name."""
    _BUILTIN_THEMES[name] = module_path


def unregister_theme(name: str) -> None:
    _BUILTIN_THEMES.pop(name, None)


def _theme_entry_points() -> dict:
    return {ep.name: ep for ep in entry_points(group=ENTRY_POINT_GROUP)}


def _import_candidates(identifier: str) -> list[str]:
    candidates = [identifier]
    if "-" in identifier:
        candidates.append(identifier.replace("-", "_"))
    return candidates


def _import_theme(identifier: str) -> Any:
    for name in _import_candidates(identifier):
        try:
            return importlib.import_module(name)
        except ModuleNotFoundError as e:
            # only a miss on the theme itself moves on to the next candidate
            if e.name is not None and name != e.name and not name.startswith(f"{e.name}."):
                raise ThemeLoadError(identifier, str(e)) from e
        except Exception as e:
            raise ThemeLoadError(identifier, f"{type(e).__name__}: {e}") from e

    raise ThemeLoadError(identifier)


def load_theme(identifier: str) -> Any:
    """Resolve a theme identifier to an object exposing ``render``."""
    if not identifier:
        raise ThemeLoadError(identifier, "empty theme name")

    if identifier in _BUILTIN_THEMES:
        theme = _import_theme(_BUILTIN_THEMES[identifier])
    else:
        eps = _theme_entry_points()
        if identifier in eps:
            try:
                theme = eps[identifier].load()
            except Exception as e:
                raise ThemeLoadError(identifier, f"{type(e).__name__}: {e}") from e
        else:
            theme = _import_theme(identifier)

    if not callable(getattr(theme, "render", None)):
        raise ThemeLoadError(identifier, "it does not provide a render function")
    return theme


def _describe(obj: Any) -> str:
    description = (getattr(obj, "__doc__", None) or "No description available").strip()
    return description.split("\n")[0]


def list_themes() -> list[dict[str, str]]:
    """List bundled and installed themes with one-line descriptions."""
    themes = []
    for name, module_path in _BUILTIN_THEMES.items():
        try:
            description = _describe(importlib.import_module(module_path))
        except ImportError:
            description = f"(unavailable: {module_path})"
        themes.append({"name": name, "description": description})

    for name, ep in _theme_entry_points().items():
        if name in _BUILTIN_THEMES:
            continue
        themes.append({"name": name, "description": f"installed theme ({ep.value})"})

    return sorted(themes, key=lambda x: x["name"])


__all__ = [
    "ENTRY_POINT_GROUP",
    "load_theme",
    "list_themes",
    "register_theme",
    "unregister_theme",
]
