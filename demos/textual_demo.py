#!/usr/bin/env python3
import logging
import sys
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Header

from linepager import ViewportConfig
from linepager.ui.textual import ViewportWidget


class PagerDemo(App):
    CSS = """
    #main_container {
        background: transparent;
    }

    #pager {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.title = f"linepager - {path.name}"

        # Setup logging
        log_file = Path("./logs/textual_demo.log")
        log_file.parent.mkdir(exist_ok=True)

        logging.basicConfig(
            filename=log_file,
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filemode="a",
        )
        self.logger = logging.getLogger(__name__)
        self.logger.info("Pager demo app started")

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main_container"):
            yield ViewportWidget(config=ViewportConfig.from_env(), id="pager")
        yield Footer()

    async def on_mount(self) -> None:
        """Called when app is mounted."""
        pager = self.query_one("#pager", ViewportWidget)
        pager.focus()
        try:
            await pager.aload(self.path)
        except OSError as e:
            self.logger.error(f"Failed to load {self.path}: {e}")
            pager.set_content(f"Could not open {self.path}: {e}")

    def on_viewport_widget_viewport_updated(self, event: ViewportWidget.ViewportUpdated) -> None:
        """Handle ViewportUpdated events from the ViewportWidget."""
        self.sub_title = f"line {event.offset + 1}/{event.total_lines} {event.scroll_percent:4.0%}"


def run_demo() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__)
    PagerDemo(path).run()


if __name__ == "__main__":
    run_demo()
