"""
autotaborder - Automatic tab order for user-interface trees

A Python library that assigns keyboard navigation indices to the elements of
a user-interface tree in reading order: top to bottom, then left to right
within a row.

Example:
    >>> from autotaborder import Element, ElementCategory, assign_order
    >>> form = Element("form", category=ElementCategory.CONTAINER)
    >>> ok = form.add(Element("ok", x=100, y=50))
    >>> name = form.add(Element("name", x=10, y=52))
    >>> assign_order(form)
    >>> name.nav_index, ok.nav_index
    (0, 1)

Debug Mode Example:
    >>> generator = TabOrderGenerator()
    >>> report = generator.generate(layout_text, debug=True)
    >>> trace = generator.get_trace()
    >>> print(trace.summary())
"""

from .adapter import ElementAdapter, UIAdapter
from .generator import TabOrderGenerator
from .models import Element, ElementCategory
from .ordering import BAND_WIDTH_Y, OrderAssigner, assign_order
from .parser import ParseError, LayoutParser, parse_layout
from .png_renderer import OrderPNGRenderer, render_order_png
from .report import OrderReportRenderer, render_order_report
from .tracer import ContainerPass, IndexAssignment, OrderTrace
from .tree import ElementTree, TreeAdapter

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TabOrderGenerator",
    "OrderAssigner",
    "assign_order",
    "BAND_WIDTH_Y",
    # Model
    "Element",
    "ElementCategory",
    "ElementTree",
    # Adapters
    "UIAdapter",
    "ElementAdapter",
    "TreeAdapter",
    # Parser
    "LayoutParser",
    "ParseError",
    "parse_layout",
    # Rendering
    "OrderReportRenderer",
    "render_order_report",
    "OrderPNGRenderer",
    "render_order_png",
    # Debug/Tracing
    "OrderTrace",
    "ContainerPass",
    "IndexAssignment",
]
