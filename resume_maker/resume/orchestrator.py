"""Load, render and write a resume in every requested format."""

from pathlib import Path

from resume_maker.resume.buffers import RenderSpec
from resume_maker.resume.html import generate_html
from resume_maker.resume.loader import load_resume
from resume_maker.shared import Color, ResumeIOError, echo


def output_path(output_name: str, spec: RenderSpec) -> Path:
    return Path(f"{output_name}.{spec.mode.value}")


def _write(path: Path, buffer: bytes) -> None:
    try:
        path.write_bytes(buffer)
    except OSError as e:
        raise ResumeIOError(str(path), str(e)) from e


async def render_resume(
    output_name: str,
    theme: str,
    resume_path: str | Path,
    renders: list[RenderSpec],
    verbose: bool = False,
) -> str:
    """Render ``resume_path`` with ``theme`` once and write one file per spec.

    Outputs are produced one after another in the given order. A failure
    stops the run; files already written are left in place.
    """
    resume = load_resume(resume_path)
    if verbose:
        echo(f"Loaded {resume_path}", Color.INFO)

    html = await generate_html(theme, resume)
    if verbose:
        echo(f"Rendered HTML with theme '{theme}' ({len(html)} chars)", Color.INFO)

    statuses = []
    for spec in renders:
        buffer = await spec.convert(html)
        path = output_path(output_name, spec)
        _write(path, buffer)
        statuses.append(f"{spec.mode.value.upper()} file written to {path}")

    return ", ".join(statuses)
