"""Theme listing command."""

import argparse

from resume_maker.shared import Color, echo
from resume_maker.themes import list_themes


def cmd_themes(args: argparse.Namespace) -> int:
    """Handle list themes command."""
    themes = list_themes()
    if not themes:
        echo("No themes found.", Color.INFO)
        return 0

    echo("Available themes:", Color.INFO)
    for theme in themes:
        echo(f"  {theme['name']}: {theme['description']}", Color.INFO)
    return 0
