"""
Parser module for layout descriptions.

Handles parsing of indented layout text into an ElementTree. Each element is
one line, nested elements are indented below their container:

    form Main @ 0,0 400x300
      label lblName @ 10,12
      textbox txtName @ 80,10 200x20
      tabcontrol tabs @ 10,50
        tabpage general @ 0,0
          button ok @ 10,10
      richtext notes @ 10,200 disabled
"""

import re
import textwrap
from typing import Dict, List, Tuple

from .models import ElementCategory
from .tree import ElementTree


class ParseError(Exception):
    """Raised when input parsing fails."""

    pass


# Element kinds accepted in layout text and the category each maps to
KIND_CATEGORIES: Dict[str, ElementCategory] = {
    "form": ElementCategory.CONTAINER,
    "panel": ElementCategory.CONTAINER,
    "group": ElementCategory.CONTAINER,
    "container": ElementCategory.CONTAINER,
    "tabcontrol": ElementCategory.CONTAINER,
    "tabpage": ElementCategory.TAB_PAGE,
    "richtext": ElementCategory.RICH_TEXT,
    "label": ElementCategory.LABEL,
    "button": ElementCategory.CONTROL,
    "textbox": ElementCategory.CONTROL,
    "checkbox": ElementCategory.CONTROL,
    "radio": ElementCategory.CONTROL,
    "combobox": ElementCategory.CONTROL,
    "listbox": ElementCategory.CONTROL,
    "control": ElementCategory.CONTROL,
}


class LayoutParser:
    """Parses layout description text into an ElementTree."""

    # <kind> <name> @ <x>,<y> [<w>x<h>] [disabled]
    LINE_PATTERN = re.compile(
        r"^(?P<kind>\w+)\s+(?P<name>\S+)\s*@\s*"
        r"(?P<x>-?\d+)\s*,\s*(?P<y>-?\d+)"
        r"(?:\s+(?P<width>\d+)x(?P<height>\d+))?"
        r"(?:\s+(?P<disabled>disabled))?\s*$"
    )

    def parse(self, input_text: str) -> ElementTree:
        """
        Parse layout text and return the element tree.

        Args:
            input_text: Multi-line layout description

        Returns:
            ElementTree with one node per element line

        Raises:
            ParseError: If the input is empty or malformed
        """
        tree = ElementTree()
        # Open levels as (indent, handle), innermost last
        stack: List[Tuple[int, str]] = []

        lines = textwrap.dedent(input_text).split("\n")

        for line_num, line in enumerate(lines, 1):
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith("#"):
                continue

            indent = len(line) - len(line.lstrip())
            match = self.LINE_PATTERN.match(stripped)
            if not match:
                raise ParseError(f"Line {line_num}: Invalid element line: {stripped}")

            kind = match.group("kind").lower()
            if kind not in KIND_CATEGORIES:
                raise ParseError(f"Line {line_num}: Unknown element kind '{kind}'")

            name = match.group("name")
            if name in tree:
                raise ParseError(f"Line {line_num}: Duplicate element name '{name}'")

            parent = self._find_parent(stack, indent, line_num, tree, name)

            tree.add(
                name,
                parent=parent,
                x=int(match.group("x")),
                y=int(match.group("y")),
                width=int(match.group("width") or 0),
                height=int(match.group("height") or 0),
                enabled=match.group("disabled") is None,
                category=KIND_CATEGORIES[kind],
                kind=kind,
            )
            stack.append((indent, name))

        if tree.root is None:
            raise ParseError("No elements found in input")

        return tree

    def _find_parent(
        self,
        stack: List[Tuple[int, str]],
        indent: int,
        line_num: int,
        tree: ElementTree,
        name: str,
    ):
        """
        Pop closed levels from the stack and return the parent handle.

        Args:
            stack: Open levels as (indent, handle)
            indent: Indentation of the current line
            line_num: Line number for error messages
            tree: Tree being built
            name: Name of the element on the current line

        Returns:
            Parent handle, or None for the root line
        """
        if not stack:
            if indent > 0:
                raise ParseError(
                    f"Line {line_num}: Root element '{name}' must not be indented"
                )
            return None

        while stack and stack[-1][0] >= indent:
            closed_indent, _ = stack.pop()
            if stack and stack[-1][0] < indent < closed_indent:
                raise ParseError(
                    f"Line {line_num}: Indentation does not match any open level"
                )

        if not stack:
            raise ParseError(
                f"Line {line_num}: Second root element '{name}', "
                f"tree already has root '{tree.root}'"
            )

        return stack[-1][1]


def parse_layout(input_text: str) -> ElementTree:
    """
    Convenience function to parse a layout description.

    Args:
        input_text: Multi-line layout description

    Returns:
        ElementTree
    """
    parser = LayoutParser()
    return parser.parse(input_text)
