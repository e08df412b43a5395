"""MarkupBuilder for call-ordered HTML assembly.

Tracks open elements on a LIFO stack and appends every emission to a
single buffer. Output order is exactly call order: there is no tree and
no deferred serialization. Parts are appended to a list and joined once
in finalize(), so a build cycle is O(n) in the size of the output.

Malformed sequences degrade silently. A close() with nothing open
appends nothing and raises nothing; text() may be emitted with no
element open. Nothing is escaped and names are not validated.

Thread Safety:
A MarkupBuilder belongs to one build cycle and one writer. Use reset()
to reuse it sequentially; never share an instance between threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from fsf.utils.logger import get_logger

logger = get_logger(__name__)


class MarkupBuilder:
    """Stack-tracked markup accumulator.

    Usage:
            >>> b = MarkupBuilder()
            >>> _ = b.open("ul").open("li").text("a").close()
            >>> _ = b.open("li").text("b").close().close()
            >>> b.finalize()
            '<ul><li>a</li><li>b</li></ul>'

    Args:
        on_unmatched_close: Optional debug hook called with the builder
            whenever close() is called on an empty stack.

    """

    __slots__ = ("_stack", "_parts", "_size", "_on_unmatched_close")

    def __init__(
        self,
        on_unmatched_close: Callable[[MarkupBuilder], None] | None = None,
    ) -> None:
        self._stack: list[str] = []
        self._parts: list[str] = []
        self._size = 0
        self._on_unmatched_close = on_unmatched_close

    def _emit(self, s: str) -> None:
        if s:
            self._parts.append(s)
            self._size += len(s)

    def open(self, name: str) -> MarkupBuilder:
        """Emit ``<name>`` and push name onto the open stack.

        Args:
            name: Element name, emitted as given

        Returns:
            self for method chaining
        """
        self._emit(f"<{name}>")
        self._stack.append(name)
        return self

    def close(self) -> MarkupBuilder:
        """Close the most recently opened element.

        With no element open this is a no-op: nothing is emitted.

        Returns:
            self for method chaining
        """
        if not self._stack:
            logger.debug("close() with no open element ignored")
            if self._on_unmatched_close is not None:
                self._on_unmatched_close(self)
            return self

        name = self._stack.pop()
        self._emit(f"</{name}>")
        return self

    def text(self, s: str) -> MarkupBuilder:
        """Append text verbatim.

        Args:
            s: Text to append (not escaped)

        Returns:
            self for method chaining
        """
        self._emit(s)
        return self

    def set_attribute(self, name: str, value: Any) -> None:
        """Accept an attribute and do nothing with it.

        Attributes are not rendered; output is never affected.
        """

    def finalize(self) -> str:
        """Return everything emitted so far.

        Does not clear state. Elements still open stay unclosed in the
        returned markup.
        """
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def reset(self) -> MarkupBuilder:
        """Clear the open stack and the buffer for reuse.

        Returns:
            self for method chaining
        """
        self._stack.clear()
        self._parts.clear()
        self._size = 0
        return self

    @contextmanager
    def element(self, name: str) -> Iterator[MarkupBuilder]:
        """Open an element for the duration of a with-block.

        Example:
            >>> b = MarkupBuilder()
            >>> with b.element("p"):
            ...     _ = b.text("hi")
            >>> b.finalize()
            '<p>hi</p>'
        """
        self.open(name)
        try:
            yield self
        finally:
            self.close()

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._stack)

    @property
    def open_elements(self) -> tuple[str, ...]:
        """Snapshot of the open stack, outermost first."""
        return tuple(self._stack)

    def __len__(self) -> int:
        """Return the length of the accumulated output."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if anything has been emitted."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"MarkupBuilder(depth={self.depth}, size={self._size})"
