"""
Adapter layer between the ordering algorithm and a user-interface tree.

The ordering never touches toolkit objects directly. It goes through a
UIAdapter, which knows how to enumerate children, read geometry and category,
and write the navigation fields. Any toolkit can be supported by providing an
object that satisfies the UIAdapter protocol.

Key Components:
- UIAdapter: Protocol describing the capabilities the ordering needs
- ElementAdapter: Adapter for trees built from models.Element
"""

from typing import Any, Protocol, Sequence, Tuple

from .models import Element, ElementCategory


class UIAdapter(Protocol):
    """Protocol for objects giving access to a user-interface tree."""

    def children(self, handle: Any) -> Sequence[Any]:
        """Return the child handles of an element, in toolkit order."""
        ...

    def position(self, handle: Any) -> Tuple[int, int]:
        """Return the (x, y) position relative to the parent."""
        ...

    def is_enabled(self, handle: Any) -> bool:
        """Return whether the element is enabled."""
        ...

    def category(self, handle: Any) -> ElementCategory:
        """Return the element category."""
        ...

    def set_nav_index(self, handle: Any, index: int) -> None:
        """Set the navigation index."""
        ...

    def set_nav_stop(self, handle: Any, stop: bool) -> None:
        """Set the navigation stop flag."""
        ...

    def name(self, handle: Any) -> str:
        """Return a display name for the element."""
        ...


class ElementAdapter:
    """
    Adapter for trees of models.Element objects.

    Handles are the Element instances themselves.

    Example:
        >>> root = Element("form", category=ElementCategory.CONTAINER)
        >>> ok = root.add(Element("ok", x=10, y=10))
        >>> adapter = ElementAdapter()
        >>> adapter.position(ok)
        (10, 10)
    """

    def children(self, handle: Element) -> Sequence[Element]:
        return handle.children

    def position(self, handle: Element) -> Tuple[int, int]:
        return handle.x, handle.y

    def is_enabled(self, handle: Element) -> bool:
        return handle.enabled

    def category(self, handle: Element) -> ElementCategory:
        return handle.category

    def set_nav_index(self, handle: Element, index: int) -> None:
        handle.nav_index = index

    def set_nav_stop(self, handle: Element, stop: bool) -> None:
        handle.nav_stop = stop

    def name(self, handle: Element) -> str:
        return handle.name
