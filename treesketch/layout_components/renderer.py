import logging
from typing import Any, Iterable, Optional, Set, Union

from rich.markup import escape

from ..errors import ConfigurationError, LayoutInvariantError
from .canvas import Canvas
from .core import LineChars, NodePosition, display_width
from .layout import TreeArena, TreeLayout
from .node import display_value

logger = logging.getLogger(__name__)

DEFAULT_LABEL = "Current tree state"
FOOTER = "-" * 42


class TreeRenderer:
    """Draws the shape of a binary or n-ary tree as plain text.

    The renderer keeps no state between calls: every ``render`` builds its own
    arena, layout and canvas, so one instance can be shared freely.
    """

    def __init__(
        self,
        *,
        line_style: Optional[Union[str, LineChars]] = None,
        highlight_marker: str = " (*)",
        highlight_style: Optional[str] = None,
        missing_value: str = "[?]",
        empty_placeholder: str = "<empty tree>",
        footer: str = FOOTER,
        left_padding: int = 1,
        rows_per_offset: int = 1,
    ):
        for name, value in (
            ("highlight_marker", highlight_marker),
            ("missing_value", missing_value),
            ("empty_placeholder", empty_placeholder),
            ("footer", footer),
        ):
            if not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string.")

        for name, value in (("left_padding", left_padding), ("rows_per_offset", rows_per_offset)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer.")
        if left_padding < 0:
            raise ConfigurationError("left_padding cannot be negative.")
        if rows_per_offset < 1:
            raise ConfigurationError("rows_per_offset must be at least 1.")

        if highlight_style is not None and not isinstance(highlight_style, str):
            raise ConfigurationError("highlight_style must be a string when provided.")

        if isinstance(line_style, LineChars):
            self.chars = line_style
        else:
            style_key = line_style or "ascii"
            if not isinstance(style_key, str):
                raise ConfigurationError("line_style must be a string or LineChars instance.")
            try:
                self.chars = LineChars.for_style(style_key)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.highlight_marker = highlight_marker
        self.highlight_style = highlight_style
        self.missing_value = missing_value
        self.empty_placeholder = empty_placeholder
        self.footer = footer
        self.left_padding = left_padding
        self.rows_per_offset = rows_per_offset

    def render(
        self,
        root: Any,
        label: str = DEFAULT_LABEL,
        highlights: Optional[Iterable[Any]] = None,
        *,
        include_markup: bool = False,
    ) -> str:
        # nothing but " ---" follows the title, so a trailing backslash stays single
        title = escape(label + " ")[:-1] if include_markup else label
        header = f"\n--- {title} ---"
        if root is None:
            return "\n".join([header, self.empty_placeholder, self.footer])

        highlighted: Set[int] = {id(node) for node in highlights or ()}
        arena = TreeArena(root)
        logger.debug("Rendering %d nodes for %r", len(arena), label)
        texts = [self._display_text(node, highlighted) for node in arena.nodes]
        marked = [id(node) in highlighted for node in arena.nodes]

        layout = TreeLayout(
            arena,
            texts,
            rows_per_offset=self.rows_per_offset,
            left_padding=self.left_padding,
        )
        positions = layout.apply()

        canvas = Canvas(layout.width, layout.height)
        for position in positions:
            canvas.reserve(position.start_x, position.y, position.width)

        for parent, child in arena.edges():
            self._draw_edge(canvas, positions[parent], positions[child])

        for position, is_marked in zip(positions, marked):
            canvas.write_text(position.start_x, position.y, position.text)
            if is_marked and include_markup and self.highlight_style and position.width:
                canvas.insert_markup(position.start_x, position.y, f"[{self.highlight_style}]")
                canvas.insert_markup(
                    position.start_x + display_width(position.text[:-1]),
                    position.y,
                    f"[/{self.highlight_style}]",
                    position="suffix",
                )

        body = canvas.rows(include_markup=include_markup)
        if not any(body):
            body = [positions[0].text]
        return "\n".join([header, *body, self.footer])

    def _display_text(self, node: Any, highlighted: Set[int]) -> str:
        text = display_value(node, self.missing_value)
        if id(node) in highlighted:
            text += self.highlight_marker
        return text

    def _draw_edge(self, canvas: Canvas, parent: NodePosition, child: NodePosition) -> None:
        if child.y <= parent.y:
            raise LayoutInvariantError(
                f"Child {child.text!r} at row {child.y} is not below parent "
                f"{parent.text!r} at row {parent.y}."
            )

        start_y = parent.y + 1
        end_y = child.y - 1
        if child.x == parent.x:
            canvas.draw_vertical(parent.x, start_y, end_y, self.chars.vertical)
            return

        if child.x < parent.x:
            char = self.chars.left
            start_x = max(0, parent.x - 1)
        else:
            char = self.chars.right
            start_x = min(canvas.width - 1, parent.x + 1)
        canvas.draw_line(start_x, start_y, child.x, end_y, char)


def render(
    root: Any,
    label: str = DEFAULT_LABEL,
    highlights: Optional[Iterable[Any]] = None,
) -> str:
    return TreeRenderer().render(root, label, highlights)

