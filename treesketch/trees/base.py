from typing import Any, Iterable, Optional

from rich.console import Console

from ..layout_components.renderer import DEFAULT_LABEL, TreeRenderer


class LoggedTree:
    """Shared plumbing for the exercise trees: a root and a way to show it."""

    def __init__(
        self,
        root: Any = None,
        *,
        console: Optional[Console] = None,
        renderer: Optional[TreeRenderer] = None,
    ) -> None:
        self._root = root
        self._console = console or Console()
        self._renderer = renderer or TreeRenderer(highlight_style="bold yellow")

    @property
    def root(self) -> Any:
        return self._root

    def visualize(self, context: str = DEFAULT_LABEL, highlights: Optional[Iterable[Any]] = None) -> str:
        return self._renderer.render(self._root, context, highlights)

    def log(self, context: str = DEFAULT_LABEL, highlights: Optional[Iterable[Any]] = None) -> None:
        text = self._renderer.render(self._root, context, highlights, include_markup=True)
        self._console.print(text, highlight=False, emoji=False, soft_wrap=True)
