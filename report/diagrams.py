"""Diagram rendering boundary.

Diagram source from the model is opaque text. The report only talks to a
DiagramRenderer, so a different diagramming backend can be swapped in
without touching the report code or its tests.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DIAGRAM_UNAVAILABLE = "_Diagram unavailable._"


class DiagramRenderer(ABC):
    """Turns diagram source into a block of report text."""

    @abstractmethod
    def render(self, title: str, source: str) -> str:
        pass


class MermaidFenceRenderer(DiagramRenderer):
    """Emits the source inside a fenced ``mermaid`` block for Markdown viewers."""

    def render(self, title: str, source: str) -> str:
        if not source or not source.strip():
            return DIAGRAM_UNAVAILABLE
        # Models sometimes wrap the code in their own fence
        body = source.strip()
        if body.startswith("```"):
            body = body.split("\n", 1)[1] if "\n" in body else ""
            if body.rstrip().endswith("```"):
                body = body.rstrip()[:-3]
        return f"```mermaid\n{body.strip()}\n```"


def render_diagram_safely(renderer: DiagramRenderer, title: str, source: str) -> str:
    """Render one diagram; a renderer failure degrades to a placeholder."""
    try:
        return renderer.render(title, source)
    except Exception as e:
        logger.warning("Could not render diagram %r: %s", title, e)
        return DIAGRAM_UNAVAILABLE
