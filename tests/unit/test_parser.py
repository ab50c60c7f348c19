"""Unit tests for the parser module."""

import pytest

from autotaborder.models import ElementCategory
from autotaborder.parser import KIND_CATEGORIES, LayoutParser, ParseError, parse_layout


class TestLayoutParser:
    """Tests for LayoutParser class."""

    def test_parse_simple(self, simple_layout):
        """Test parsing the simple layout fixture."""
        tree = LayoutParser().parse(simple_layout)
        assert tree.root == "Main"
        assert tree.children("Main") == ["name", "nameLabel", "cancel", "ok"]

    def test_geometry(self, simple_tree):
        """Test positions and sizes are read."""
        attrs = simple_tree.element("name")
        assert (attrs["x"], attrs["y"]) == (80, 10)
        assert (attrs["width"], attrs["height"]) == (150, 20)

    def test_size_optional(self):
        """Test elements without a size get zero width and height."""
        tree = parse_layout("form f @ 0,0\n  button b @ 1,2")
        attrs = tree.element("b")
        assert (attrs["width"], attrs["height"]) == (0, 0)

    def test_categories(self, simple_tree):
        """Test kinds map to categories and are kept for reporting."""
        assert simple_tree.element("Main")["category"] == ElementCategory.CONTAINER
        assert simple_tree.element("nameLabel")["category"] == ElementCategory.LABEL
        assert simple_tree.element("ok")["kind"] == "button"

    def test_nesting(self, tabbed_layout):
        """Test indentation builds nested containers."""
        tree = parse_layout(tabbed_layout)
        assert tree.children("Settings") == ["search", "tabs", "close"]
        assert tree.children("tabs") == ["general", "advanced"]
        assert tree.children("general") == ["autosave", "backups"]
        assert tree.children("advanced") == ["port"]
        assert tree.element("general")["category"] == ElementCategory.TAB_PAGE

    def test_disabled_flag(self):
        """Test the disabled keyword."""
        tree = parse_layout(
            "form f @ 0,0\n  richtext notes @ 0,0 100x50 disabled\n  button b @ 0,0"
        )
        assert tree.element("notes")["enabled"] is False
        assert tree.element("notes")["category"] == ElementCategory.RICH_TEXT
        assert tree.element("b")["enabled"] is True

    def test_negative_coordinates(self):
        """Test negative coordinates are accepted."""
        tree = parse_layout("form f @ 0,0\n  button b @ -5,-10")
        attrs = tree.element("b")
        assert (attrs["x"], attrs["y"]) == (-5, -10)

    def test_comments_and_blank_lines(self):
        """Test comments and blank lines are ignored."""
        tree = parse_layout(
            """
            # settings dialog

            form f @ 0,0
              # buttons
              button b @ 0,0
            """
        )
        assert tree.children("f") == ["b"]

    def test_kind_case_insensitive(self):
        """Test kinds are matched case-insensitively."""
        tree = parse_layout("Form f @ 0,0\n  Button b @ 0,0")
        assert tree.element("b")["kind"] == "button"

    def test_dedent_to_open_level(self):
        """Test dedenting back to an ancestor level."""
        tree = parse_layout(
            "form f @ 0,0\n"
            "  panel p @ 0,0\n"
            "      button inner @ 0,0\n"
            "  button outer @ 0,0\n"
        )
        assert tree.children("p") == ["inner"]
        assert tree.children("f") == ["p", "outer"]

    def test_known_kinds(self):
        """Test the supported kinds."""
        assert KIND_CATEGORIES["tabpage"] == ElementCategory.TAB_PAGE
        assert KIND_CATEGORIES["tabcontrol"] == ElementCategory.CONTAINER
        assert KIND_CATEGORIES["checkbox"] == ElementCategory.CONTROL


class TestParseErrors:
    """Tests for ParseError reporting."""

    def test_empty_input(self):
        """Test empty input raises ParseError."""
        with pytest.raises(ParseError, match="No elements"):
            parse_layout("")

    def test_only_comments(self):
        """Test input with only comments raises ParseError."""
        with pytest.raises(ParseError):
            parse_layout("# nothing here\n\n")

    def test_malformed_line(self):
        """Test a line without position raises ParseError with line number."""
        with pytest.raises(ParseError, match="Line 2"):
            parse_layout("form f @ 0,0\n  button b")

    def test_unknown_kind(self):
        """Test an unknown kind raises ParseError."""
        with pytest.raises(ParseError, match="Unknown element kind 'slider'"):
            parse_layout("form f @ 0,0\n  slider s @ 0,0")

    def test_duplicate_name(self):
        """Test a repeated name raises ParseError."""
        with pytest.raises(ParseError, match="Duplicate"):
            parse_layout("form f @ 0,0\n  button b @ 0,0\n  button b @ 5,0")

    def test_second_root(self):
        """Test a second unindented element raises ParseError."""
        with pytest.raises(ParseError, match="Second root"):
            parse_layout("form f @ 0,0\nform g @ 0,0")

    def test_indented_root(self):
        """Test that the first element line may not be indented."""
        with pytest.raises(ParseError, match="must not be indented"):
            parse_layout("# dialog\n  form f @ 0,0")

    def test_inconsistent_dedent(self):
        """Test a dedent that matches no open level raises ParseError."""
        with pytest.raises(ParseError, match="Line 4: Indentation"):
            parse_layout(
                "form f @ 0,0\n"
                "    panel p @ 0,0\n"
                "        button a @ 0,0\n"
                "  button b @ 0,0\n"
            )
