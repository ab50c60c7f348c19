#!/usr/bin/env python3
"""
Demo script for the tab order generator.

This script shows the tab order computed for a few typical dialog layouts.
"""

from autotaborder import TabOrderGenerator


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def demo_1():
    """Demo 1: Login Dialog"""
    print_header("Demo 1: Login Dialog")

    input_text = """
    form Login @ 0,0 320x200
      button cancel @ 210,150 90x25
      button login @ 110,150 90x25
      textbox password @ 100,50 200x20
      label passwordLabel @ 10,52 80x20
      textbox user @ 100,20 200x20
      label userLabel @ 10,22 80x20
    """
    print("Input:")
    print("------")
    print(input_text)

    print("\nOutput:")
    print("-------")
    generator = TabOrderGenerator()
    print(generator.generate(input_text))


def demo_2():
    """Demo 2: Tabbed Settings"""
    print_header("Demo 2: Tabbed Settings With Debug Trace")

    input_text = """
    form Settings @ 0,0 400x300
      textbox search @ 10,10 200x20
      tabcontrol tabs @ 10,40 380x200
        tabpage general @ 0,20 380x180
          checkbox autosave @ 10,40
          checkbox backups @ 10,10
          richtext changelog @ 10,70 300x80 disabled
        tabpage advanced @ 0,20 380x180
          textbox port @ 10,10
      button close @ 300,260 80x25
    """
    print("Input:")
    print("------")
    print(input_text)

    print("\nOutput:")
    print("-------")
    generator = TabOrderGenerator()
    print(generator.generate(input_text, debug=True))
    print()
    print(generator.get_trace().dump())


def demo_3():
    """Demo 3: Drifting Row"""
    print_header("Demo 3: Slightly Misaligned Row")

    input_text = """
    form Toolbar @ 0,0 400x60
      button open @ 0,0
      button save @ 70,6
      button print @ 140,12
      button close @ 210,18
    """
    print("Input:")
    print("------")
    print(input_text)

    print("\nOutput:")
    print("-------")
    generator = TabOrderGenerator()
    print(generator.generate(input_text))


def main():
    """Run all demos."""
    demo_1()
    demo_2()
    demo_3()


if __name__ == "__main__":
    main()
