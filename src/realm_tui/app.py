# =============================================================================
# Realm-TUI Textual Host
# =============================================================================
# Runs an Application model inside Textual.
#
# Textual takes care of everything terminal-specific: alternate screen, raw
# mode, decoding key presses / pastes / resizes. The host:
#   - translates Textual events and queues them in an input backend
#   - polls that backend on a timer, routing each event through the View
#     and the update loop (Application.tick)
#   - repaints when the model asks for it or the redraw interval elapsed,
#     by drawing the model into a Frame shown by a single widget
#   - exits when the model sets its quit flag
# =============================================================================

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import RenderableType
from textual import events
from textual.app import App, ComposeResult
from textual.logging import TextualHandler
from textual.widget import Widget

from realm_tui import __app_name__, __version__
from realm_tui.config import Config, ConfigError, print_paths
from realm_tui.demo import DemoModel, build_view
from realm_tui.host import Application
from realm_tui.input import QueueInputHandler, event_from_textual

logger = logging.getLogger(__name__)


class FrameDisplay(Widget, can_focus=True):
    """
    Shows the frame the application model draws.

    Every key press and paste it receives is handed to `on_event` instead
    of going through Textual's bindings and focus chain.
    """

    DEFAULT_CSS = """
    FrameDisplay {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        model: Application,
        on_event: Callable[[events.Event], None],
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._model = model
        self._on_event = on_event

    def render(self) -> RenderableType:
        return self._model.render(self.size.width, self.size.height)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._on_event(event)

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        self._on_event(event)


class RealmApp(App):
    """
    Textual application hosting a Realm-TUI model.

    Usage:
        >>> model = DemoModel(build_view())
        >>> RealmApp(model).run()

    Attributes:
        model: The application model being run.
        config: Host configuration.
        input_handler: Queue of translated events waiting to be processed.
    """

    TITLE = "Realm-TUI"

    def __init__(
        self,
        model: Application,
        config: Config | None = None,
        config_error: str | None = None,
    ) -> None:
        """
        Initialize the host.

        Args:
            model: Application model to run.
            config: Host configuration. Defaults to Config().
            config_error: Error met while loading the config, shown on start.
        """
        super().__init__()
        self.model = model
        self.config = config or Config()
        self.input_handler = QueueInputHandler()
        self._config_error = config_error

    def compose(self) -> ComposeResult:
        yield FrameDisplay(self.model, self.enqueue, id="frame")

    def on_mount(self) -> None:
        """Focus the frame and start polling."""
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        self.query_one(FrameDisplay).focus()
        self.set_interval(self.config.host.poll_interval_ms / 1000, self.poll)

    def on_resize(self, event: events.Resize) -> None:
        self.enqueue(event)

    def enqueue(self, event: events.Event) -> None:
        """Translate a Textual event and queue it for the next poll."""
        translated = event_from_textual(event)
        if translated is not None:
            self.input_handler.push(translated)

    def poll(self) -> None:
        """Process queued events, then repaint or exit as needed."""
        while not self.model.quit and self.model.tick(self.input_handler):
            pass

        if self.model.quit:
            logger.info("Model requested quit")
            self.exit()
            return

        if self.model.should_redraw():
            self.query_one(FrameDisplay).refresh()


# =============================================================================
# Logging
# =============================================================================

def setup_logging(config: Config, debug: bool = False) -> None:
    """
    Configure logging for a run.

    Logs go to the configured log file. In debug mode the level is DEBUG and
    records are also sent to the Textual devtools console.

    Args:
        config: Loaded configuration.
        debug: Enable debug logging.
    """
    level = logging.DEBUG if debug else logging.getLevelName(config.logging.level)

    log_path = config.log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [logging.FileHandler(log_path, encoding="utf-8")]
    if debug:
        handlers.append(TextualHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Realm-TUI: component-based terminal UIs, Model-View-Update style",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point: runs the demo application.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and sets up logging
        4. Starts the Textual host

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    # Load configuration, falling back to defaults on error
    config_error: str | None = None
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        config = Config()
        config_error = str(e)

    setup_logging(config, debug=args.debug)
    if config_error:
        logger.error(config_error)

    model = DemoModel(build_view(config), config)
    app = RealmApp(model, config=config, config_error=config_error)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
