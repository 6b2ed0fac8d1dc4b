"""Resume rendering command."""

import argparse
import asyncio
import traceback
from pathlib import Path

from resume_maker.config import load_config
from resume_maker.resume import render_resume, resolve_render_specs
from resume_maker.shared import (
    Color,
    RenderMode,
    ResumeMakerError,
    ResumeValidationError,
    echo,
)


def default_output_name(resume_path: str) -> str:
    return Path(resume_path).stem


def cmd_render(args: argparse.Namespace) -> int:
    """Handle resume rendering."""
    try:
        # unknown modes fail before the config or the resume is read
        modes = [RenderMode.from_string(token) for token in args.render or []]
        config = load_config(args.config)
        renders = resolve_render_specs(modes, pdf=config.pdf)

        if not renders:
            echo("No render mode requested, nothing will be written. Use -r html/pdf", Color.WARNING)

        status = asyncio.run(
            render_resume(
                output_name=args.output_name or default_output_name(args.file),
                theme=args.theme,
                resume_path=args.file,
                renders=renders,
                verbose=args.verbose,
            )
        )
    except ResumeValidationError as e:
        echo(str(e), Color.ERROR)
        for issue in e.issues:
            echo(f"  {issue}", Color.ERROR)
        return e.exit_code
    except ResumeMakerError as e:
        echo(f"Render failed: {e}", Color.ERROR)
        if args.verbose:
            traceback.print_exc()
        return e.exit_code

    if status:
        echo(status, Color.SUCCESS)
    return 0
