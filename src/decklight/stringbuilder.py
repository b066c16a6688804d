"""StringBuilder for O(n) markup accumulation.

Highlighted output is built from many small fragments (one or more per
span). Appending to a list and joining once keeps rendering linear in the
size of the output.

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append('<span class="keyword">').append("message").append("</span>")
            >>> sb.build()
            '<span class="keyword">message</span>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
