"""Resume schema validation command."""

import argparse
import traceback

from resume_maker.resume import validate_resume
from resume_maker.shared import Color, ResumeMakerError, ResumeValidationError, echo


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle resume validation."""
    try:
        issues = validate_resume(args.file)
    except ResumeMakerError as e:
        echo(str(e), Color.ERROR)
        if args.verbose:
            traceback.print_exc()
        return e.exit_code

    if issues:
        echo("Resume validation failed:", Color.ERROR)
        for issue in issues:
            echo(f"  {issue}", Color.ERROR)
        return ResumeValidationError.exit_code

    echo(f"{args.file} is a valid resume", Color.SUCCESS)
    return 0
