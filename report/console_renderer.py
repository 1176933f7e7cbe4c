"""Terminal view of the report, built on rich."""

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from contracts import AnalysisResult

from .diagrams import DiagramRenderer
from .markdown_renderer import render_markdown


def render_console(
    console: Console,
    result: Optional[AnalysisResult],
    error: Optional[str] = None,
    is_analyzing: bool = False,
    diagram_renderer: Optional[DiagramRenderer] = None,
) -> None:
    """Print the current view: error line, progress line, then the report.

    A failed analysis shows the error above the previous report, which stays
    on screen.
    """
    if error:
        console.print(Panel(error, border_style="red", title="Error", title_align="left"))
    if is_analyzing:
        console.print("[dim]Analyzing...[/dim]")
    console.print(Markdown(render_markdown(result, diagram_renderer)))
