"""Unit tests for the generator module."""

import os
import tempfile

import pytest

from autotaborder.generator import TabOrderGenerator
from autotaborder.models import Element, ElementCategory
from autotaborder.parser import ParseError
from autotaborder.tracer import OrderTrace


class TestTabOrderGeneratorInit:
    """Tests for TabOrderGenerator initialization."""

    def test_default_initialization(self):
        """Test TabOrderGenerator with default parameters."""
        gen = TabOrderGenerator()
        assert gen.band_width == 10
        assert gen.scale == 2
        assert gen.font is None

    def test_custom_band_width(self):
        """Test TabOrderGenerator with custom band_width."""
        assert TabOrderGenerator(band_width=4).band_width == 4

    def test_invalid_band_width(self):
        """Test that a non-positive band width raises ValueError."""
        with pytest.raises(ValueError, match="band_width"):
            TabOrderGenerator(band_width=0)

    def test_assigner_built_once(self):
        """Test the generator reuses one assigner with its band width."""
        gen = TabOrderGenerator(band_width=4)
        assigner = gen.assigner
        assert assigner.band_width == 4
        gen.generate("form f @ 0,0\n  button b @ 0,0")
        assert gen.assigner is assigner

    def test_trace_records_band_width(self):
        """Test the debug trace carries the generator band width."""
        gen = TabOrderGenerator(band_width=4)
        gen.generate("form f @ 0,0\n  button b @ 0,0", debug=True)
        assert gen.get_trace().band_width == 4

    def test_invalid_scale(self):
        """Test that a scale below 1 raises ValueError."""
        with pytest.raises(ValueError, match="scale"):
            TabOrderGenerator(scale=0)


class TestTabOrderGeneratorGenerate:
    """Tests for generate and build."""

    def test_generate_returns_report(self, generator, simple_layout):
        """Test generate returns a report naming every element."""
        report = generator.generate(simple_layout)
        for name in ("Main", "name", "nameLabel", "cancel", "ok"):
            assert name in report

    def test_build_returns_ordered_tree(self, generator, simple_layout):
        """Test build returns the ordered tree."""
        tree = generator.build(simple_layout)
        assert tree.element("ok")["nav_index"] == 1
        assert tree.element("nameLabel")["nav_stop"] is False

    def test_band_width_applied(self, simple_layout):
        """Test that a wide band merges both rows into one."""
        tree = TabOrderGenerator(band_width=100).build(simple_layout)
        # One row ordered by X: nameLabel, name, ok, cancel
        assert tree.element("name")["nav_index"] == 0
        assert tree.element("ok")["nav_index"] == 1
        assert tree.element("cancel")["nav_index"] == 2

    def test_parse_error_propagates(self, generator):
        """Test invalid input raises ParseError."""
        with pytest.raises(ParseError):
            generator.generate("not a layout")

    def test_order_element_tree(self, generator, form):
        """Test ordering an Element tree through the generator."""
        generator.order(form)
        assert [c.nav_index for c in form.children] == [2, 0, 1]


class TestTabOrderGeneratorDebug:
    """Tests for debug tracing."""

    def test_no_trace_by_default(self, generator, simple_layout):
        """Test get_trace returns None without debug."""
        generator.generate(simple_layout)
        assert generator.get_trace() is None

    def test_debug_captures_trace(self, generator, simple_layout):
        """Test debug=True captures an OrderTrace."""
        generator.generate(simple_layout, debug=True)
        trace = generator.get_trace()
        assert isinstance(trace, OrderTrace)
        assert trace.get_pass("Main").rows == [["nameLabel", "name"], ["ok", "cancel"]]

    def test_trace_reset_on_next_run(self, generator, simple_layout):
        """Test a later run without debug clears the trace."""
        generator.generate(simple_layout, debug=True)
        generator.generate(simple_layout)
        assert generator.get_trace() is None

    def test_debug_order(self, generator):
        """Test debug tracing through order()."""
        root = Element("form", category=ElementCategory.CONTAINER)
        root.add(Element("a"))
        generator.order(root, debug=True)
        assert generator.get_trace().get_assignment("a").nav_index == 0


class TestTabOrderGeneratorSave:
    """Tests for file output."""

    def test_save_txt(self, generator, simple_layout):
        """Test saving the report to a text file."""
        with tempfile.NamedTemporaryFile(suffix=".txt", delete=False) as f:
            filename = f.name
        try:
            generator.save_txt(simple_layout, filename)
            with open(filename, encoding="utf-8") as f:
                content = f.read()
            assert content == generator.generate(simple_layout)
        finally:
            os.unlink(filename)

    def test_save_png(self, generator, simple_layout):
        """Test saving a PNG image."""
        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            filename = f.name
        try:
            assert generator.save_png(simple_layout, filename) == filename
            assert os.path.getsize(filename) > 0
        finally:
            os.unlink(filename)
