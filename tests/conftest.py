"""Pytest configuration and shared fixtures for autotaborder tests."""

import pytest

from autotaborder import (
    Element,
    ElementCategory,
    OrderAssigner,
    TabOrderGenerator,
    parse_layout,
)


@pytest.fixture
def simple_layout():
    """Two rows of controls, the second row given in reverse X order."""
    return """
    form Main @ 0,0 300x200
      textbox name @ 80,10 150x20
      label nameLabel @ 10,12 60x20
      button cancel @ 200,60 80x25
      button ok @ 110,62 80x25
    """


@pytest.fixture
def tabbed_layout():
    """Form with a tab control holding two pages."""
    return """
    form Settings @ 0,0 400x300
      textbox search @ 10,10 200x20
      tabcontrol tabs @ 10,40 380x200
        tabpage general @ 0,20 380x180
          checkbox autosave @ 10,40
          checkbox backups @ 10,10
        tabpage advanced @ 0,20 380x180
          textbox port @ 10,10
      button close @ 300,260 80x25
    """


@pytest.fixture
def simple_tree(simple_layout):
    """Parsed tree for simple_layout."""
    return parse_layout(simple_layout)


@pytest.fixture
def form():
    """Element form with one row of three buttons given in reverse order."""
    root = Element("form", category=ElementCategory.CONTAINER)
    root.add(Element("third", x=30, y=0))
    root.add(Element("first", x=10, y=0))
    root.add(Element("second", x=20, y=0))
    return root


@pytest.fixture
def assigner():
    """Default OrderAssigner instance."""
    return OrderAssigner()


@pytest.fixture
def generator():
    """Default TabOrderGenerator instance."""
    return TabOrderGenerator()
