"""
Main tab order generator module.

Combines parsing, ordering and rendering to produce a tab order report for a
layout description.
"""

from pathlib import Path
from typing import Any, Optional

from .ordering import BAND_WIDTH_Y, OrderAssigner
from .parser import LayoutParser
from .png_renderer import OrderPNGRenderer
from .report import OrderReportRenderer
from .tracer import OrderTrace
from .tree import ElementTree


class TabOrderGenerator:
    """
    Generate tab orders from layout descriptions.

    Example:
        >>> generator = TabOrderGenerator()
        >>> report = generator.generate('''
        ... form Main @ 0,0
        ...   button cancel @ 120,10
        ...   button ok @ 10,12
        ... ''')
        >>> print(report)
    """

    def __init__(
        self,
        band_width: int = BAND_WIDTH_Y,
        scale: int = 2,
        font: Optional[str] = None,
    ):
        """
        Initialize the generator.

        Args:
            band_width: Row tolerance for grouping elements into rows
            scale: Resolution multiplier for PNG output
            font: Path to a TrueType font for PNG output
        """
        if scale < 1:
            raise ValueError("scale must be at least 1")

        self.band_width = band_width
        self.scale = scale
        self.font = font

        self.parser = LayoutParser()
        # Raises ValueError for a non-positive band width
        self.assigner = OrderAssigner(band_width=band_width)
        self.report_renderer = OrderReportRenderer()
        self._trace: Optional[OrderTrace] = None

    def order(self, root: Any, debug: bool = False) -> None:
        """
        Assign the tab order of an existing tree.

        Args:
            root: ElementTree or root Element
            debug: If True, capture an OrderTrace (see get_trace)
        """
        self._trace = OrderTrace(band_width=self.band_width) if debug else None
        self.assigner.trace = self._trace
        self.assigner.assign_order(root)

    def build(self, input_text: str, debug: bool = False) -> ElementTree:
        """
        Parse a layout description and assign its tab order.

        Args:
            input_text: Layout description
            debug: If True, capture an OrderTrace

        Returns:
            The ordered ElementTree
        """
        tree = self.parser.parse(input_text)
        self.order(tree, debug=debug)
        return tree

    def generate(self, input_text: str, debug: bool = False) -> str:
        """
        Generate a tab order report from a layout description.

        Args:
            input_text: Layout description
            debug: If True, capture an OrderTrace

        Returns:
            Report text listing every element with its navigation index
        """
        return self.report_renderer.render(self.build(input_text, debug=debug))

    def get_trace(self) -> Optional[OrderTrace]:
        """
        Get the trace of the last run made with debug=True.

        Returns:
            OrderTrace, or None if the last run was not in debug mode
        """
        return self._trace

    def save_txt(self, input_text: str, filename: str) -> None:
        """
        Save the tab order report to a text file.

        Args:
            input_text: Layout description
            filename: Output filename
        """
        Path(filename).write_text(self.generate(input_text), encoding="utf-8")

    def save_png(self, input_text: str, filename: str) -> str:
        """
        Save a PNG showing every element with its navigation index.

        Args:
            input_text: Layout description
            filename: Output filename (should end in .png)

        Returns:
            Path to the saved PNG file
        """
        tree = self.build(input_text)
        renderer = OrderPNGRenderer(scale=self.scale, font_path=self.font)
        return renderer.render(tree, filename)
