"""Resume rendering module.

Validates JSON/YAML resumes following the jsonresume.org schema and
renders them through a theme to HTML and PDF files.
"""

from resume_maker.resume.buffers import (
    RenderSpec,
    html_to_buffer,
    html_to_pdf_buffer,
    resolve_render_specs,
)
from resume_maker.resume.html import generate_html
from resume_maker.resume.loader import SchemaIssue, load_resume, validate_resume
from resume_maker.resume.models import Resume
from resume_maker.resume.orchestrator import render_resume

__all__ = [
    "Resume",
    "RenderSpec",
    "SchemaIssue",
    "generate_html",
    "html_to_buffer",
    "html_to_pdf_buffer",
    "load_resume",
    "render_resume",
    "resolve_render_specs",
    "validate_resume",
]
