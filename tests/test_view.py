# =============================================================================
# Tests for the View registry
# =============================================================================

from realm_tui.core.event import Key, KeyEvent
from realm_tui.core.msg import OnChange, OnKey, Payload, Value
from realm_tui.core.props import GenericPropsBuilder
from realm_tui.rendering import Rect


class TestMount:
    """Tests for mounting and unmounting."""

    def test_mount(self, view, stub_component):
        view.mount("A", stub_component())

        assert "A" in view
        assert len(view) == 1
        assert view.ids() == ["A"]
        assert view.focus is None

    def test_mount_replaces(self, view, stub_component):
        old, new = stub_component(), stub_component()
        view.mount("A", old)
        view.mount("A", new)

        assert len(view) == 1
        assert view.get_state("A") == new.get_state()
        view.render("A", None, Rect(0, 0, 1, 1))
        assert new.renders and not old.renders

    def test_mount_replacing_focused_keeps_focus(self, view, stub_component):
        old, new = stub_component(), stub_component()
        view.mount("A", old)
        view.active("A")
        view.mount("A", new)

        assert view.focus == "A"
        assert old.blurs == 1 and not old.focused
        assert new.focused

    def test_umount(self, view, stub_component):
        view.mount("A", stub_component())
        view.umount("A")

        assert "A" not in view
        assert view.get_props("A") is None

    def test_umount_unknown_is_ignored(self, view):
        view.umount("missing")
        assert len(view) == 0

    def test_umount_focused_clears_focus(self, view, stub_component):
        component = stub_component(reply=OnKey(KeyEvent(Key.ESC)))
        view.mount("A", component)
        view.active("A")
        view.umount("A")

        assert view.focus is None
        assert view.on(KeyEvent(Key.ESC)) is None
        assert component.blurs == 1

    def test_unmount_alias(self, view, stub_component):
        view.mount("A", stub_component())
        view.unmount("A")
        assert "A" not in view


class TestFocus:
    """Tests for focus handling."""

    def test_active(self, view, stub_component):
        a, b = stub_component(), stub_component()
        view.mount("A", a)
        view.mount("B", b)

        view.active("A")
        assert view.focus == "A" and a.focused

        view.active("B")
        assert view.focus == "B"
        assert b.focused and not a.focused

    def test_active_unmounted_keeps_focus(self, view, stub_component):
        view.mount("A", stub_component())
        view.active("A")
        view.active("missing")

        assert view.focus == "A"

    def test_active_unmounted_without_focus(self, view):
        view.active("missing")
        assert view.focus is None

    def test_active_twice_is_a_no_op(self, view, stub_component):
        component = stub_component()
        view.mount("A", component)
        view.active("A")
        view.active("A")

        assert component.activations == 1
        assert component.blurs == 0

    def test_blur_restores_previous_focus(self, view, stub_component):
        for id in ("A", "B", "C"):
            view.mount(id, stub_component())
        view.active("A")
        view.active("B")
        view.active("C")

        view.blur()
        assert view.focus == "B"
        view.blur()
        assert view.focus == "A"
        view.blur()
        assert view.focus is None

    def test_blur_skips_unmounted(self, view, stub_component):
        for id in ("A", "B", "C"):
            view.mount(id, stub_component())
        view.active("A")
        view.active("B")
        view.active("C")
        view.umount("B")

        view.blur()
        assert view.focus == "A"

    def test_blur_without_focus(self, view):
        view.blur()
        assert view.focus is None

    def test_toggling_focus_keeps_stack_bounded(self, view, stub_component):
        view.mount("A", stub_component())
        view.mount("B", stub_component())

        for _ in range(1000):
            view.active("A")
            view.active("B")

        assert view._focus_stack == ["A"]
        view.blur()
        assert view.focus == "A"
        view.blur()
        assert view.focus is None

    def test_refocusing_moves_id_to_top(self, view, stub_component):
        for id in ("A", "B", "C"):
            view.mount(id, stub_component())
        view.active("A")
        view.active("B")
        view.active("C")
        view.active("A")

        assert view._focus_stack == ["B", "C"]
        view.blur()
        assert view.focus == "C"


class TestRouting:
    """Tests for event routing, props and state by id."""

    def test_on_routes_to_focused(self, view, stub_component):
        msg = OnChange(Payload.one(Value.text("x")))
        a, b = stub_component(reply=msg), stub_component()
        view.mount("A", a)
        view.mount("B", b)
        view.active("A")

        event = KeyEvent.from_char("x")
        assert view.on(event) == ("A", msg)
        assert a.events == [event]
        assert b.events == []

    def test_on_without_focus(self, view, stub_component):
        component = stub_component(reply=OnKey(KeyEvent(Key.ESC)))
        view.mount("A", component)

        assert view.on(KeyEvent(Key.ESC)) is None
        assert component.events == []

    def test_on_component_returns_nothing(self, view, stub_component):
        view.mount("A", stub_component())
        view.active("A")
        assert view.on(KeyEvent(Key.LEFT)) is None

    def test_update_is_single_step(self, view, stub_component):
        msg = OnChange(Payload.none())
        component = stub_component(update_reply=msg)
        view.mount("A", component)
        props = GenericPropsBuilder().hidden().build()

        assert view.update("A", props) == ("A", msg)
        assert view.get_props("A") == props

    def test_update_without_reply(self, view, stub_component):
        view.mount("A", stub_component())
        assert view.update("A", GenericPropsBuilder().build()) is None

    def test_update_unknown(self, view):
        assert view.update("missing", GenericPropsBuilder().build()) is None

    def test_get_state(self, view, stub_component):
        component = stub_component()
        view.mount("A", component)
        view.active("A")
        view.on(KeyEvent(Key.UP))

        assert view.get_state("A") == Payload.one(Value.integer(1))
        assert view.get_state("missing") is None

    def test_render_unknown_draws_nothing(self, view, frame):
        view.render("missing", frame, frame.size)
        assert frame.rendered == 0

    def test_views_are_independent(self, stub_component):
        from realm_tui.view import View

        first, second = View(), View()
        first.mount("A", stub_component())

        assert "A" in first
        assert "A" not in second
