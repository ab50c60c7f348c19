"""
Element tree module using networkx as an arena of handles.

Uses networkx for:
- Tree storage (parent -> child edges, child order = successor order)
- Node attribute storage (geometry, category, navigation state)
- Pre-order traversal
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

import networkx as nx

from .models import Element, ElementCategory


class ElementTree:
    """
    User-interface tree stored as a networkx DiGraph.

    Every element is a string handle. Edges point from a parent to its
    children and networkx keeps successors in insertion order, so the order
    in which children are added is the toolkit order.

    Example:
        >>> tree = ElementTree()
        >>> _ = tree.add("form", category=ElementCategory.CONTAINER)
        >>> _ = tree.add("ok", parent="form", x=10, y=20)
        >>> tree.children("form")
        ['ok']
    """

    def __init__(self):
        self.graph: nx.DiGraph = nx.DiGraph()
        self._root: Optional[str] = None

    @property
    def root(self) -> Optional[str]:
        """Handle of the root element, or None for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __contains__(self, handle: str) -> bool:
        return handle in self.graph

    def add(
        self,
        name: str,
        parent: Optional[str] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        enabled: bool = True,
        category: ElementCategory = ElementCategory.CONTROL,
        kind: Optional[str] = None,
    ) -> str:
        """
        Add an element to the tree.

        Args:
            name: Handle of the new element
            parent: Handle of the parent, None for the root
            x: X coordinate relative to the parent
            y: Y coordinate relative to the parent
            width: Element width
            height: Element height
            enabled: Whether the element is enabled
            category: Element category
            kind: Optional toolkit kind (e.g. "button"), kept for reporting

        Returns:
            The handle of the new element

        Raises:
            ValueError: If the handle exists, a second root is added, or the
                parent is unknown
        """
        if name in self.graph:
            raise ValueError(f"Duplicate element: '{name}'")
        if parent is None:
            if self._root is not None:
                raise ValueError(
                    f"Tree already has a root '{self._root}', cannot add '{name}'"
                )
        elif parent not in self.graph:
            raise ValueError(f"Unknown parent '{parent}' for element '{name}'")

        self.graph.add_node(
            name,
            x=x,
            y=y,
            width=width,
            height=height,
            enabled=enabled,
            category=category,
            kind=kind or category.value,
            nav_index=0,
            nav_stop=True,
        )

        if parent is None:
            self._root = name
        else:
            self.graph.add_edge(parent, name)

        return name

    def element(self, handle: str) -> Dict[str, Any]:
        """Return the attribute dictionary of an element."""
        return self.graph.nodes[handle]

    def children(self, handle: str) -> List[str]:
        """Get the children of an element in insertion order."""
        return list(self.graph.successors(handle))

    def parent(self, handle: str) -> Optional[str]:
        """Get the parent of an element, None for the root."""
        predecessors = list(self.graph.predecessors(handle))
        return predecessors[0] if predecessors else None

    def depth(self, handle: str) -> int:
        """Number of ancestors of an element."""
        depth = 0
        current = self.parent(handle)
        while current is not None:
            depth += 1
            current = self.parent(current)
        return depth

    def absolute_position(self, handle: str) -> Tuple[int, int]:
        """Position of an element relative to the root's origin."""
        x, y = 0, 0
        current: Optional[str] = handle
        while current is not None and current != self._root:
            attrs = self.graph.nodes[current]
            x += attrs["x"]
            y += attrs["y"]
            current = self.parent(current)
        return x, y

    def walk(self) -> Iterator[str]:
        """Yield all handles in pre-order, children in insertion order."""
        if self._root is None:
            return iter(())
        return iter(nx.dfs_preorder_nodes(self.graph, self._root))

    def snapshot(self) -> Dict[str, Tuple[int, bool]]:
        """
        Capture the navigation state of every element.

        Returns:
            Dictionary mapping handles to (nav_index, nav_stop)
        """
        return {
            handle: (attrs["nav_index"], attrs["nav_stop"])
            for handle, attrs in self.graph.nodes(data=True)
        }

    @classmethod
    def from_element(cls, root: Element) -> "ElementTree":
        """
        Build an ElementTree from a tree of Element objects.

        Navigation state is copied along with the geometry.

        Args:
            root: Root Element

        Returns:
            A new ElementTree
        """
        tree = cls()

        def visit(element: Element, parent: Optional[str]) -> None:
            tree.add(
                element.name,
                parent=parent,
                x=element.x,
                y=element.y,
                width=element.width,
                height=element.height,
                enabled=element.enabled,
                category=element.category,
            )
            attrs = tree.element(element.name)
            attrs["nav_index"] = element.nav_index
            attrs["nav_stop"] = element.nav_stop
            for child in element.children:
                visit(child, element.name)

        visit(root, None)
        return tree


class TreeAdapter:
    """Adapter giving the ordering access to an ElementTree."""

    def __init__(self, tree: ElementTree):
        self.tree = tree

    def children(self, handle: str) -> List[str]:
        return self.tree.children(handle)

    def position(self, handle: str) -> Tuple[int, int]:
        attrs = self.tree.element(handle)
        return attrs["x"], attrs["y"]

    def is_enabled(self, handle: str) -> bool:
        return self.tree.element(handle)["enabled"]

    def category(self, handle: str) -> ElementCategory:
        return self.tree.element(handle)["category"]

    def set_nav_index(self, handle: str, index: int) -> None:
        self.tree.element(handle)["nav_index"] = index

    def set_nav_stop(self, handle: str, stop: bool) -> None:
        self.tree.element(handle)["nav_stop"] = stop

    def name(self, handle: str) -> str:
        return handle
