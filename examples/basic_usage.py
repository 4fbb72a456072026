#!/usr/bin/env python3
"""
Basic usage example for linepager.

This example demonstrates:
- Setting content on a Viewport
- Paging and line scrolling
- Reading the diff of newly visible lines
- Rendering the visible window
- High performance scroll commands
"""

from linepager import Viewport, dispatch, sync, view_down, view_up


class PrintRenderer:
    """Stand-in for a host that can scroll terminal regions."""

    def sync_scroll_area(self, lines, top_boundary, bottom_boundary):
        print(f"  sync rows {top_boundary}-{bottom_boundary}: {list(lines)}")

    def scroll_up(self, lines, top_boundary, bottom_boundary):
        print(f"  scroll in from above at rows {top_boundary}-{bottom_boundary}: {list(lines)}")

    def scroll_down(self, lines, top_boundary, bottom_boundary):
        print(f"  scroll in from below at rows {top_boundary}-{bottom_boundary}: {list(lines)}")


def main():
    viewport = Viewport(width=40, height=5)
    viewport.set_content("\n".join(f"Line {i}" for i in range(1, 31)))

    print("=== Basic Access ===")
    print(f"Total lines: {len(viewport)}")
    print(f"At top: {viewport.at_top()}, at bottom: {viewport.at_bottom()}")
    print(viewport.view())

    print("\n=== Page down ===")
    diff = viewport.page_down()
    print(f"Offset {viewport.offset}, new lines: {diff}")
    print(f"Scrolled: {viewport.scroll_percent():.0%}")

    print("\n=== Line down 3 ===")
    diff = viewport.line_down(3)
    print(f"Offset {viewport.offset}, new lines: {diff}")

    print("\n=== Goto bottom ===")
    viewport.goto_bottom()
    print(f"Offset {viewport.offset}, at bottom: {viewport.at_bottom()}")
    print(f"Page down again: {viewport.page_down()}")

    print("\n=== Short content ===")
    short = Viewport(width=40, height=5)
    short.set_content("only\ntwo lines")
    print(repr(short.view()))


def high_performance_example():
    """Example driving a region-scrolling host."""
    print(f"\n{'='*50}")
    print("HIGH PERFORMANCE RENDERING EXAMPLE")
    print(f"{'='*50}")

    viewport = Viewport(width=40, height=5, position=2, high_performance=True)
    viewport.set_content("\n".join(f"Row {i}" for i in range(20)))
    renderer = PrintRenderer()

    print(f"Placeholder view: {viewport.view()!r}")
    dispatch(sync(viewport), renderer)
    dispatch(view_down(viewport, viewport.line_down(2)), renderer)
    dispatch(view_up(viewport, viewport.line_up(1)), renderer)
    # Nothing to scroll at the top, so nothing is sent
    viewport.goto_top()
    dispatch(view_up(viewport, viewport.page_up()), renderer)


if __name__ == "__main__":
    main()
    high_performance_example()
    print("\nExample complete!")
