"""Conversion of rendered HTML into output bytes, one strategy per mode."""

from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from resume_maker.config import PdfConfig
from resume_maker.shared import BrowserError, RenderMode


BufferConverter = Callable[[str], Awaitable[bytes]]


@dataclass(frozen=True)
class RenderSpec:
    """A requested output mode and the converter that produces its bytes."""

    mode: RenderMode
    convert: BufferConverter


async def html_to_buffer(html: str) -> bytes:
    return html.encode("utf-8")


async def html_to_pdf_buffer(html: str, pdf: PdfConfig = PdfConfig()) -> bytes:
    """Print ``html`` to PDF in a fresh headless Chromium.

    Content is considered ready once the DOM is parsed, so resources that
    are still loading at that point (images, external stylesheets) may be
    missing from the output. The browser is closed before returning.
    """
    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch()
            try:
                page = await browser.new_page()
                await page.set_content(html, wait_until=pdf.wait_until)
                return await page.pdf(
                    format=pdf.format,
                    print_background=pdf.print_background,
                    margin=pdf.margin,
                )
            finally:
                await browser.close()
    except PlaywrightError as e:
        raise BrowserError(str(e)) from e


def resolve_render_specs(
    modes: list[str | RenderMode], pdf: PdfConfig | None = None
) -> list[RenderSpec]:
    """Map requested mode tokens to render specs, preserving their order.

    Tokens are matched case-insensitively; an unknown token raises
    ``UnsupportedModeError`` before anything is rendered.
    """
    converters: dict[RenderMode, BufferConverter] = {
        RenderMode.HTML: html_to_buffer,
        RenderMode.PDF: partial(html_to_pdf_buffer, pdf=pdf or PdfConfig()),
    }

    specs = []
    for token in modes:
        mode = RenderMode.from_string(token)
        specs.append(RenderSpec(mode=mode, convert=converters[mode]))
    return specs
