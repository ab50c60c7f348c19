"""
Debug tracing infrastructure for autotaborder.

This module provides data structures for capturing what the ordering did to
each container of a tree. When a trace is attached to an OrderAssigner, every
processed container produces a ContainerPass recording the rows that were
formed and the index given to each child.

Usage:
    >>> generator = TabOrderGenerator()
    >>> report = generator.generate(layout_text, debug=True)
    >>> trace = generator.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("order_trace.txt")

Passes are recorded in processing order, which is post-order: nested
containers appear before the containers that own them.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class IndexAssignment:
    """
    Record of the navigation state given to one element.

    Attributes:
        name: Element name
        nav_index: Navigation index written to the element
        nav_stop: Navigation stop flag after assignment. None when the
                  ordering left the flag untouched.
        excluded: True when the element was removed from keyboard traversal
    """

    name: str
    nav_index: int
    nav_stop: Optional[bool] = None
    excluded: bool = False

    def __str__(self) -> str:
        if self.excluded:
            return f"{self.name}: excluded (index 0, no stop)"
        return f"{self.name}: {self.nav_index}"


@dataclass
class ContainerPass:
    """
    Snapshot of the ordering of one container.

    Attributes:
        container: Name of the processed container
        rows: Element names per row, each row in X order
        assignments: Index assignments in traversal order
        skipped: Children left out of placement (tab pages)
    """

    container: str
    rows: List[List[str]] = field(default_factory=list)
    assignments: List[IndexAssignment] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"=== Container: {self.container} ==="]
        for row_idx, row in enumerate(self.rows):
            lines.append(f"  row {row_idx}: {', '.join(row)}")
        if self.skipped:
            lines.append(f"  skipped: {', '.join(self.skipped)}")
        for assignment in self.assignments:
            lines.append(f"    {assignment}")
        return "\n".join(lines)


@dataclass
class OrderTrace:
    """
    Complete trace of an ordering run.

    Attributes:
        passes: One ContainerPass per processed container
        band_width: Row tolerance used for the run
    """

    passes: List[ContainerPass] = field(default_factory=list)
    band_width: int = 10

    def add_pass(self, container_pass: ContainerPass) -> None:
        """Record a processed container."""
        self.passes.append(container_pass)

    def get_pass(self, container: str) -> Optional[ContainerPass]:
        """Get the pass of a specific container by name."""
        for container_pass in self.passes:
            if container_pass.container == container:
                return container_pass
        return None

    def get_assignment(self, name: str) -> Optional[IndexAssignment]:
        """Get the assignment recorded for an element by name."""
        for container_pass in self.passes:
            for assignment in container_pass.assignments:
                if assignment.name == name:
                    return assignment
        return None

    def excluded(self) -> List[IndexAssignment]:
        """Get all assignments that removed an element from traversal."""
        return [
            assignment
            for container_pass in self.passes
            for assignment in container_pass.assignments
            if assignment.excluded
        ]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the band width, the containers processed and
        assignment statistics.
        """
        total = sum(len(p.assignments) for p in self.passes)
        lines = [
            "=" * 60,
            "TAB ORDER TRACE SUMMARY",
            "=" * 60,
            "",
            f"Band width: {self.band_width}",
            f"Containers processed: {len(self.passes)}",
        ]

        for container_pass in self.passes:
            lines.append(
                f"  {container_pass.container}: "
                f"{len(container_pass.rows)} rows, "
                f"{len(container_pass.assignments)} elements"
            )

        lines.extend(
            [
                "",
                f"Total assignments: {total}",
                f"Excluded from traversal: {len(self.excluded())}",
            ]
        )
        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete dump of the trace including every pass."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]
        for container_pass in self.passes:
            lines.append(str(container_pass))
            lines.append("")
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
