"""
Text report of a tree's navigation order.

Renders an ElementTree as an indented listing using box-drawing characters,
one line per element:

    Main (form)
    ├── nameLabel  label      @ 10,12      index 0  no stop
    ├── name       textbox    @ 80,10      index 0
    └── tabs       tabcontrol @ 10,50      index 1
        └── general    tabpage    @ 0,0
            └── ok         button     @ 10,10      index 0

Tab pages are never placed in their parent, so no index is shown for them.
"""

from typing import List

from .models import ElementCategory
from .tree import ElementTree

TREE_CHARS = {
    "tee": "├── ",
    "last": "└── ",
    "pipe": "│   ",
    "space": "    ",
}


class OrderReportRenderer:
    """Renders the navigation state of an ElementTree as text."""

    def __init__(self, name_width: int = 0):
        """
        Initialize the renderer.

        Args:
            name_width: Minimum width of the name column. 0 sizes the column
                        to the longest element name.
        """
        self.name_width = name_width

    def render(self, tree: ElementTree) -> str:
        """
        Render the tree.

        Args:
            tree: Tree to render

        Returns:
            Report text, empty for an empty tree
        """
        if tree.root is None:
            return ""

        width = max(self.name_width, max(len(handle) for handle in tree.walk()))
        root_kind = tree.element(tree.root)["kind"]
        lines = [f"{tree.root} ({root_kind})"]
        self._render_children(tree, tree.root, "", width, lines)
        return "\n".join(lines)

    def _render_children(
        self,
        tree: ElementTree,
        handle: str,
        prefix: str,
        width: int,
        lines: List[str],
    ) -> None:
        children = tree.children(handle)
        for idx, child in enumerate(children):
            is_last = idx == len(children) - 1
            connector = TREE_CHARS["last"] if is_last else TREE_CHARS["tee"]
            lines.append(prefix + connector + self.format_element(tree, child, width))
            extension = TREE_CHARS["space"] if is_last else TREE_CHARS["pipe"]
            self._render_children(tree, child, prefix + extension, width, lines)

    def format_element(self, tree: ElementTree, handle: str, width: int = 0) -> str:
        """Format a single element line (without tree prefix)."""
        attrs = tree.element(handle)
        position = f"@ {attrs['x']},{attrs['y']}"
        text = f"{handle:<{width}}  {attrs['kind']:<10} {position:<12}"

        # Tab pages are never placed, their index is meaningless
        if attrs["category"] != ElementCategory.TAB_PAGE:
            text += f" index {attrs['nav_index']}"
            if not attrs["nav_stop"]:
                text += "  no stop"
        if not attrs["enabled"]:
            text += "  (disabled)"

        return text.rstrip()


def render_order_report(tree: ElementTree) -> str:
    """
    Convenience function to render the order report of a tree.

    Args:
        tree: Tree to render

    Returns:
        Report text
    """
    return OrderReportRenderer().render(tree)
