"""
PNG Renderer module for tab order visualisation.

Draws every element of an ElementTree at its absolute position and marks each
navigable element with a badge holding its navigation index. Elements removed
from keyboard traversal are drawn greyed out.
"""

import os
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from .models import ElementCategory
from .tree import ElementTree


class OrderPNGRenderer:
    """Renders the navigation order of an ElementTree as a PNG image."""

    def __init__(
        self,
        scale: int = 2,
        margin: int = 10,
        font_size: int = 9,
        font_path: str | None = None,
        default_size: Tuple[int, int] = (60, 20),
    ):
        """
        Initialize the renderer.

        Args:
            scale: Resolution multiplier for crisp output
            margin: Space around the drawing, in layout units
            font_size: Font size for names and badges
            font_path: Optional path to a TrueType font
            default_size: (width, height) used for elements without a size
        """
        self.scale = scale
        self.margin = margin
        self.font_size = font_size
        self.font_path = font_path
        self.default_size = default_size

        # Colors
        self.bg_color = (255, 255, 255)
        self.container_outline = (120, 120, 120)
        self.control_outline = (0, 0, 0)
        self.excluded_outline = (190, 190, 190)
        self.text_color = (0, 0, 0)
        self.badge_fill = (30, 90, 200)
        self.badge_text = (255, 255, 255)

        self.font = None
        # Layout point drawn at the margin, the top-left of the drawing
        self._origin: Tuple[int, int] = (0, 0)

    def _get_font(self) -> ImageFont.FreeTypeFont:
        """Get a font for rendering text."""
        if self.font is not None:
            return self.font

        font_size = self.font_size * self.scale

        if self.font_path and os.path.exists(self.font_path):
            try:
                self.font = ImageFont.truetype(self.font_path, font_size)
                return self.font
            except OSError:
                pass  # Fall through to default fonts

        font_options = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
            "/System/Library/Fonts/Helvetica.ttc",
            "C:/Windows/Fonts/arial.ttf",
        ]

        for path in font_options:
            if os.path.exists(path):
                try:
                    self.font = ImageFont.truetype(path, font_size)
                    return self.font
                except OSError:
                    continue

        self.font = ImageFont.load_default()
        return self.font

    def _element_size(self, attrs: dict) -> Tuple[int, int]:
        width = attrs["width"] or self.default_size[0]
        height = attrs["height"] or self.default_size[1]
        return width, height

    def _bounds(self, tree: ElementTree) -> Tuple[int, int, int, int]:
        """
        Calculate the layout area covered by every element.

        The root origin is always inside the area, elements at negative
        positions extend it to the left and upwards.

        Returns:
            (min_x, min_y, max_x, max_y) in layout units
        """
        min_x, min_y, max_x, max_y = 0, 0, 0, 0
        for handle in tree.walk():
            x, y = tree.absolute_position(handle)
            width, height = self._element_size(tree.element(handle))
            min_x = min(min_x, x)
            min_y = min(min_y, y)
            max_x = max(max_x, x + width)
            max_y = max(max_y, y + height)
        return min_x, min_y, max_x, max_y

    def _canvas_size(self, tree: ElementTree) -> Tuple[int, int]:
        """Calculate the image size needed to hold every element."""
        min_x, min_y, max_x, max_y = self._bounds(tree)
        width = (max_x - min_x + self.margin * 2) * self.scale
        height = (max_y - min_y + self.margin * 2) * self.scale
        return max(width, 100), max(height, 100)

    def _to_pixels(self, x: int, y: int) -> Tuple[int, int]:
        origin_x, origin_y = self._origin
        return (
            (x - origin_x + self.margin) * self.scale,
            (y - origin_y + self.margin) * self.scale,
        )

    def render(self, tree: ElementTree, output_path: str = "taborder.png") -> str:
        """
        Render the tree as a PNG image.

        Args:
            tree: Tree to render, ordered or not
            output_path: Path to save the PNG file

        Returns:
            Path to the saved PNG file
        """
        if tree.root is None:
            img = Image.new("RGB", (200, 100), self.bg_color)
            img.save(output_path)
            return output_path

        min_x, min_y, _, _ = self._bounds(tree)
        self._origin = (min_x, min_y)

        img = Image.new("RGB", self._canvas_size(tree), self.bg_color)
        draw = ImageDraw.Draw(img)
        font = self._get_font()

        # Pre-order: containers are drawn before their children
        for handle in tree.walk():
            attrs = tree.element(handle)
            x, y = tree.absolute_position(handle)
            width, height = self._element_size(attrs)
            left, top = self._to_pixels(x, y)
            right, bottom = self._to_pixels(x + width, y + height)

            excluded = not attrs["nav_stop"]
            is_container = len(tree.children(handle)) > 0
            if excluded:
                outline = self.excluded_outline
            elif is_container:
                outline = self.container_outline
            else:
                outline = self.control_outline

            draw.rectangle([left, top, right, bottom], outline=outline, width=self.scale)
            draw.text(
                (left + 3 * self.scale, top + 2 * self.scale),
                handle,
                font=font,
                fill=self.excluded_outline if excluded else self.text_color,
            )

            if handle != tree.root and not excluded:
                if attrs["category"] != ElementCategory.TAB_PAGE:
                    self._draw_badge(draw, right, top, str(attrs["nav_index"]))

        img.save(output_path, "PNG")
        return output_path

    def _draw_badge(self, draw: ImageDraw.ImageDraw, right: int, top: int, text: str):
        """Draw an index badge at the top right corner of an element."""
        font = self._get_font()
        bbox = draw.textbbox((0, 0), text, font=font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        pad = 2 * self.scale

        badge = [right - text_w - pad * 2, top, right, top + text_h + pad * 2]
        draw.rectangle(badge, fill=self.badge_fill)
        draw.text(
            (badge[0] + pad - bbox[0], top + pad - bbox[1]),
            text,
            font=font,
            fill=self.badge_text,
        )


def render_order_png(
    tree: ElementTree, output_path: str = "taborder.png", scale: int = 2
) -> str:
    """
    Convenience function to render a tree's order as PNG.

    Args:
        tree: Tree to render
        output_path: Path to save the PNG file
        scale: Resolution multiplier

    Returns:
        Path to the saved PNG file
    """
    return OrderPNGRenderer(scale=scale).render(tree, output_path)
