"""HTML generation through a theme."""

import inspect
from typing import Any

from resume_maker.shared import RenderError, ResumeMakerError
from resume_maker.themes import load_theme


def _theme_name(theme: Any) -> str:
    return getattr(theme, "__name__", None) or type(theme).__name__


async def render(resume: dict, theme: Any) -> str:
    """Apply ``theme`` to ``resume``.

    Themes may return the HTML directly or an awaitable resolving to it;
    both are awaited into a plain string here.
    """
    name = _theme_name(theme)
    try:
        rendered = theme.render(resume)
        if inspect.isawaitable(rendered):
            rendered = await rendered
    except ResumeMakerError:
        raise
    except Exception as e:
        raise RenderError(name, f"{type(e).__name__}: {e}") from e

    if not isinstance(rendered, str):
        raise RenderError(name, f"expected a string, got {type(rendered).__name__}")
    return rendered


async def generate_html(theme_identifier: str, resume: dict) -> str:
    theme = load_theme(theme_identifier)
    return await render(resume, theme)
