"""
Data models for tab order computation.

This module contains the element model that the ordering algorithm works on
when no GUI toolkit is involved. Elements form a tree: containers own an
ordered list of child elements, leaves own none.

Classes:
    ElementCategory: Classification of an element for the exclusion rules.
    Element: A node of a user-interface tree with geometry and navigation state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class ElementCategory(Enum):
    """
    Category of a user-interface element.

    The ordering only distinguishes a few kinds of element:

    - CONTAINER: owns other elements (forms, panels, group boxes).
    - TAB_PAGE: a page of a tab container; never a navigation target itself.
    - RICH_TEXT: a rich text input; skipped when disabled.
    - LABEL: static text; always skipped.
    - CONTROL: any other focusable control.
    """

    CONTAINER = "container"
    TAB_PAGE = "tabpage"
    RICH_TEXT = "richtext"
    LABEL = "label"
    CONTROL = "control"


@dataclass
class Element:
    """
    A node in a user-interface tree.

    Attributes:
        name: Identifier of the element (unique within a tree by convention).
        x: X coordinate relative to the parent element.
        y: Y coordinate relative to the parent element.
        width: Width of the element. Not used for ordering.
        height: Height of the element. Not used for ordering.
        enabled: Whether the element accepts input.
        category: Kind of element, see ElementCategory.
        nav_index: Navigation (tab) index, written by the ordering.
        nav_stop: Whether keyboard traversal stops at this element.
        children: Child elements in toolkit order.
    """

    name: str
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    enabled: bool = True
    category: ElementCategory = ElementCategory.CONTROL
    nav_index: int = 0
    nav_stop: bool = True
    children: List["Element"] = field(default_factory=list)

    @property
    def is_container(self) -> bool:
        """True if the element owns at least one child."""
        return len(self.children) > 0

    def add(self, child: "Element") -> "Element":
        """Append a child element and return it."""
        self.children.append(child)
        return child

    def walk(self) -> Iterator["Element"]:
        """Yield this element and all its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional["Element"]:
        """Return the first element in this subtree with the given name."""
        for element in self.walk():
            if element.name == name:
                return element
        return None

    def __str__(self) -> str:
        return self.name
