"""
Tab order assignment based on visual position.

The ordering processes a tree bottom-up. For every container it:
- collects the direct children, ordering nested containers first
- groups the placeable children into rows by Y coordinate
- sorts each row by X coordinate
- numbers the flattened sequence with a counter local to the container

Two elements belong to the same row when their Y coordinates differ by less
than the band width. Children are compared with the previously placed child,
not with the first child of the row, so a row can drift downwards over many
slightly offset elements.
"""

from typing import Any, List, Optional

from .adapter import ElementAdapter, UIAdapter
from .models import ElementCategory
from .tracer import ContainerPass, IndexAssignment, OrderTrace
from .tree import ElementTree, TreeAdapter

# Maximum Y distance between consecutive elements of one row
BAND_WIDTH_Y = 10


class OrderAssigner:
    """
    Assigns navigation indices to a user-interface tree.

    Example:
        >>> from autotaborder.models import Element, ElementCategory
        >>> root = Element("form", category=ElementCategory.CONTAINER)
        >>> _ = root.add(Element("b", x=30, y=0))
        >>> _ = root.add(Element("a", x=10, y=2))
        >>> OrderAssigner().assign_order(root)
        >>> [child.nav_index for child in root.children]
        [1, 0]
    """

    def __init__(
        self,
        adapter: Optional[UIAdapter] = None,
        band_width: int = BAND_WIDTH_Y,
        trace: Optional[OrderTrace] = None,
    ):
        """
        Initialize the assigner.

        Args:
            adapter: Access to the tree. Resolved from the root when omitted.
            band_width: Row tolerance in coordinate units, must be positive
            trace: Optional OrderTrace receiving one pass per container
        """
        if band_width <= 0:
            raise ValueError("band_width must be a positive number")

        self.adapter = adapter
        self.band_width = band_width
        self._active: UIAdapter = adapter or ElementAdapter()
        self.trace = trace
        if self.trace is not None:
            self.trace.band_width = band_width

    def assign_order(self, root: Any) -> None:
        """
        Assign navigation indices to every element below root.

        A root without children is left untouched.

        Args:
            root: Root handle, Element or ElementTree
        """
        adapter = self.adapter
        if isinstance(root, ElementTree):
            adapter = adapter or TreeAdapter(root)
            root = root.root
            if root is None:
                return
        self._active = adapter or ElementAdapter()

        if len(self._active.children(root)) > 0:
            self._order_container(root)

    def _order_container(self, container: Any) -> None:
        """Order one container after ordering its nested containers."""
        adapter = self._active
        placeable = []
        skipped = []

        for child in adapter.children(container):
            if len(adapter.children(child)) > 0:
                self._order_container(child)

            if adapter.category(child) == ElementCategory.TAB_PAGE:
                skipped.append(child)
                continue

            placeable.append(child)

        rows = self._sort_rows(self.group_rows(placeable))
        container_pass = None
        if self.trace is not None:
            container_pass = ContainerPass(
                container=adapter.name(container),
                rows=[[adapter.name(item) for item in row] for row in rows],
                skipped=[adapter.name(item) for item in skipped],
            )

        tab_index = 0
        for item in [item for row in rows for item in row]:
            if self.is_excluded(item):
                adapter.set_nav_index(item, 0)
                adapter.set_nav_stop(item, False)
                if container_pass is not None:
                    container_pass.assignments.append(
                        IndexAssignment(
                            adapter.name(item), 0, nav_stop=False, excluded=True
                        )
                    )
                continue

            adapter.set_nav_index(item, tab_index)
            if container_pass is not None:
                container_pass.assignments.append(
                    IndexAssignment(adapter.name(item), tab_index)
                )
            tab_index += 1

        if container_pass is not None:
            self.trace.add_pass(container_pass)

    def group_rows(self, items: List[Any]) -> List[List[Any]]:
        """
        Group items into rows by Y coordinate.

        Items are sorted on Y (stable) and a new row starts whenever the Y
        distance to the previously placed item reaches the band width.

        Args:
            items: Handles of sibling elements

        Returns:
            Rows from top to bottom, items in Y order within each row
        """
        rows: List[List[Any]] = []
        last_y = -self.band_width

        for item in sorted(items, key=lambda i: self._active.position(i)[1]):
            current_y = self._active.position(item)[1]

            if abs(current_y - last_y) >= self.band_width or not rows:
                rows.append([])

            rows[-1].append(item)
            last_y = current_y

        return rows

    def _sort_rows(self, rows: List[List[Any]]) -> List[List[Any]]:
        """Sort every row on X, keeping the current order for equal X."""
        return [sorted(row, key=lambda i: self._active.position(i)[0]) for row in rows]

    def order_items(self, items: List[Any]) -> List[Any]:
        """
        Return items in navigation order: rows top to bottom, left to right.

        Args:
            items: Handles of sibling elements

        Returns:
            Flattened list of handles
        """
        return [item for row in self._sort_rows(self.group_rows(items)) for item in row]

    def is_excluded(self, item: Any) -> bool:
        """True for labels and disabled rich text inputs."""
        category = self._active.category(item)
        if category == ElementCategory.LABEL:
            return True
        return category == ElementCategory.RICH_TEXT and not self._active.is_enabled(
            item
        )


def assign_order(
    root: Any,
    adapter: Optional[UIAdapter] = None,
    band_width: int = BAND_WIDTH_Y,
    trace: Optional[OrderTrace] = None,
) -> None:
    """
    Convenience function to assign the tab order of a tree.

    Args:
        root: Root handle, Element or ElementTree
        adapter: Optional adapter for toolkit trees
        band_width: Row tolerance
        trace: Optional OrderTrace to record the run
    """
    OrderAssigner(adapter=adapter, band_width=band_width, trace=trace).assign_order(
        root
    )
