from typing import Dict, List, Set, Tuple

from rich.markup import escape

from ..errors import LayoutOverflowError
from .core import char_width


class Canvas:

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = [[" " for _ in range(width)] for _ in range(height)]
        self.cell_widths = [[1 for _ in range(width)] for _ in range(height)]
        self.reserved: Set[Tuple[int, int]] = set()
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        if not self.in_bounds(x, y):
            raise LayoutOverflowError(f"Tree content exceeds canvas bounds at ({x}, {y}).")
        if width < 1:
            width = 1

        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            xi = x + i
            if not (0 <= xi < self.width):
                raise LayoutOverflowError(f"Tree content exceeds canvas bounds at ({xi}, {y}).")
            self.grid[y][xi] = " "
            self.cell_widths[y][xi] = 0

    def get(self, x: int, y: int) -> str:
        if self.in_bounds(x, y):
            if self.cell_widths[y][x] == 0:
                return " "
            return self.grid[y][x]
        return " "

    def reserve(self, x: int, y: int, width: int) -> None:
        for xi in range(x, x + width):
            if self.in_bounds(xi, y):
                self.reserved.add((xi, y))

    def is_reserved(self, x: int, y: int) -> bool:
        return (x, y) in self.reserved

    def plot(self, x: int, y: int, char: str) -> None:
        if self.in_bounds(x, y) and not self.is_reserved(x, y):
            self.set(x, y, char)

    def draw_vertical(self, x: int, y0: int, y1: int, char: str) -> None:
        for y in range(y0, y1 + 1):
            self.plot(x, y, char)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, char: str) -> None:
        """Rasterize a line with Bresenham's algorithm, leaving reserved cells alone."""
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy

        max_iterations = 2 * self.width * self.height
        iterations = 0
        while iterations < max_iterations:
            iterations += 1
            self.plot(x0, y0, char)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def write_text(self, x: int, y: int, text: str) -> None:
        for char in text:
            width = char_width(char)
            self.set(x, y, char, width)
            x += width

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup:
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def rows(self, include_markup: bool = False) -> List[str]:
        lines: List[str] = []
        for y in range(self.height):
            parts: List[str] = []
            plain: List[str] = []
            for x in range(self.width):
                if self.cell_widths[y][x] == 0:
                    continue
                markup_cell = self.markup.get((x, y)) if include_markup else None
                if markup_cell and markup_cell.get("prefix"):
                    parts.append(escape("".join(plain)))
                    plain = []
                    parts.extend(markup_cell["prefix"])
                plain.append(self.grid[y][x])
                if markup_cell and markup_cell.get("suffix"):
                    parts.append(escape("".join(plain)))
                    plain = []
                    parts.extend(markup_cell["suffix"])
            tail = "".join(plain).rstrip()
            if include_markup:
                # no tag follows the tail, so its trailing backslash stays as is
                tail = escape(tail + " ")[:-1]
            parts.append(tail)
            lines.append("".join(parts).rstrip())
        return lines
