"""Report rendering for analysis results."""

from .diagrams import (
    DIAGRAM_UNAVAILABLE,
    DiagramRenderer,
    MermaidFenceRenderer,
    render_diagram_safely,
)
from .markdown_renderer import (
    EMPTY_STATE,
    LAYER_ICONS,
    DEFAULT_LAYER_ICON,
    format_confidence,
    layer_icon,
    render_markdown,
)
from .console_renderer import render_console

__all__ = [
    "DIAGRAM_UNAVAILABLE",
    "DiagramRenderer",
    "MermaidFenceRenderer",
    "render_diagram_safely",
    "EMPTY_STATE",
    "LAYER_ICONS",
    "DEFAULT_LAYER_ICON",
    "format_confidence",
    "layer_icon",
    "render_markdown",
    "render_console",
]
