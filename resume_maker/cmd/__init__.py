"""Command implementations for the resume-maker CLI."""

from resume_maker.cmd.render import cmd_render
from resume_maker.cmd.themes import cmd_themes
from resume_maker.cmd.validate import cmd_validate

__all__ = [
    "cmd_render",
    "cmd_themes",
    "cmd_validate",
]
