"""
Sink: the drawing capability every renderer provides.

The layout engine never touches a PDF library directly. It walks LayoutBlocks
and calls these methods in document order; a sink turns the calls into bytes.

Sinks that place content themselves set `manual_pagination = True` and expose a
PageState as `state`. The engine then decides page breaks before each block.
Sinks backed by a flowing layout (platypus) leave pagination to the library.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from quire.contexts.intake.roles import LineRole
    from quire.contexts.layout.engine import PageState
    from quire.contexts.layout.stylesheet import BlockStyle


class Sink(ABC):
    manual_pagination: bool = False
    state: Optional["PageState"] = None

    @abstractmethod
    def emit_text(self, role: "LineRole", text: str, style: "BlockStyle", height: float) -> None:
        """Draw a (possibly wrapped) line of text with the role's typography."""

    @abstractmethod
    def emit_bullet(self, marker: str, text: str, style: "BlockStyle", height: float) -> None:
        """Draw a bullet row: marker column, then wrapped content column."""

    @abstractmethod
    def emit_rule(self, style: "BlockStyle") -> None:
        """Draw a horizontal rule under the most recent text."""

    @abstractmethod
    def emit_spacer(self, height: float) -> None:
        """Leave vertical space."""

    @abstractmethod
    def page_break(self) -> None:
        """Start a new page."""

    @abstractmethod
    def finish(self) -> bytes:
        """Complete the document and return its bytes."""
