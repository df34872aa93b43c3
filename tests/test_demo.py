# =============================================================================
# Tests for the application model, the demo and the Textual host
# =============================================================================

import asyncio
import logging

from realm_tui.app import RealmApp, parse_args, setup_logging
from realm_tui.config import Config
from realm_tui.core.event import Key, KeyEvent, ResizeEvent
from realm_tui.core.msg import OnSubmit, Payload, Value
from realm_tui.demo import COMPONENT_INPUT, COMPONENT_LABEL, DemoModel, build_view
from realm_tui.input import QueueInputHandler


def run_keys(model, *events):
    handler = QueueInputHandler(events)
    while model.tick(handler):
        pass


class TestDemoModel:
    """End-to-end tests of the demo through the model."""

    def test_initial_view(self):
        view = build_view()

        assert view.focus == COMPONENT_INPUT
        assert set(view.ids()) == {COMPONENT_INPUT, COMPONENT_LABEL}

    def test_submit_updates_label(self):
        model = DemoModel(build_view())

        run_keys(model, KeyEvent.from_char("h"), KeyEvent.from_char("i"))
        msg = model.view.on(KeyEvent(Key.ENTER))

        assert msg == (COMPONENT_INPUT, OnSubmit(Payload.one(Value.text("hi"))))
        assert model.update(msg) is None
        label = model.view.get_props(COMPONENT_LABEL)
        assert label.get_own("text").unwrap_one() == "You typed: 'hi'"

    def test_label_drawn_after_submit(self):
        model = DemoModel(build_view())

        run_keys(model, KeyEvent.from_char("h"), KeyEvent.from_char("i"), KeyEvent(Key.ENTER))
        frame = model.render(60, 10)

        lines = frame.plain_lines()
        assert "Type in something nice" in lines[1]
        assert "hi" in lines[2]
        assert lines[4].strip() == "You typed: 'hi'"

    def test_escape_quits(self):
        model = DemoModel(build_view())

        run_keys(model, KeyEvent(Key.ESC))

        assert model.quit is True

    def test_other_events_do_nothing(self):
        model = DemoModel(build_view())

        assert model.handle(ResizeEvent(80, 24)) == 1
        assert model.handle(KeyEvent(Key.LEFT)) == 1
        assert model.quit is False

    def test_input_length_from_config(self):
        config = Config()
        config.ui.input_max_length = 2
        model = DemoModel(build_view(config), config)

        run_keys(model, *(KeyEvent.from_char(c) for c in "abc"))

        assert model.view.get_state(COMPONENT_INPUT) == Payload.one(Value.text("ab"))


class TestApplication:
    """Tests for the redraw bookkeeping."""

    def test_render_resets_redraw(self):
        model = DemoModel(build_view())
        model.redraw_interval = 60.0
        assert model.should_redraw()

        model.render(40, 8)
        assert not model.should_redraw()

        model.handle(KeyEvent.from_char("x"))
        assert model.should_redraw()

    def test_redraw_interval_elapsed(self):
        model = DemoModel(build_view())
        model.reset()
        model.redraw_interval = 0.0
        model.last_redraw -= 1.0

        assert model.should_redraw()

    def test_tick_without_events(self):
        model = DemoModel(build_view())
        assert model.tick(QueueInputHandler()) is False


class TestCli:
    """Tests for argument parsing and logging setup."""

    def test_parse_args(self, temp_dir):
        args = parse_args(["--debug", "--config", str(temp_dir / "c.toml")])

        assert args.debug is True
        assert args.config == temp_dir / "c.toml"
        assert args.paths is False

    def test_setup_logging_writes_to_file(self, temp_dir):
        config = Config()
        config.logging.level = "INFO"
        config.logging.file = str(temp_dir / "logs" / "realm.log")

        try:
            setup_logging(config)
            logging.getLogger("realm_tui.test").info("hello log")
            for handler in logging.getLogger().handlers:
                handler.flush()

            assert "hello log" in (temp_dir / "logs" / "realm.log").read_text()
        finally:
            for handler in logging.getLogger().handlers[:]:
                handler.close()
                logging.getLogger().removeHandler(handler)


class TestRealmApp:
    """Tests running the demo inside Textual's headless test harness."""

    def test_type_submit_and_quit(self):
        async def scenario():
            model = DemoModel(build_view())
            app = RealmApp(model)
            async with app.run_test() as pilot:
                await pilot.press("h", "i", "enter")
                await pilot.pause(0.2)
                label = model.view.get_props(COMPONENT_LABEL).get_own("text").unwrap_one()

                await pilot.press("escape")
                await pilot.pause(0.2)
            return model, label

        model, label = asyncio.run(scenario())

        assert label == "You typed: 'hi'"
        assert model.quit is True
