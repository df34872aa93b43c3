# =============================================================================
# Tests for messages and input events
# =============================================================================

import dataclasses

import pytest

from realm_tui.core.event import Key, KeyEvent, KeyModifiers, PasteEvent, ResizeEvent
from realm_tui.core.msg import (
    OnChange,
    OnKey,
    OnSubmit,
    Payload,
    PayloadShape,
    Value,
    ValueKind,
)


class TestValue:
    """Tests for message values."""

    def test_constructors(self):
        assert Value.boolean(True) == Value(ValueKind.BOOL, True)
        assert Value.integer(3) == Value(ValueKind.INT, 3)
        assert Value.number(2) == Value(ValueKind.FLOAT, 2.0)
        assert Value.text("hi") == Value(ValueKind.TEXT, "hi")

    def test_kind_is_part_of_equality(self):
        assert Value.integer(1) != Value.number(1.0)
        assert Value.integer(1) != Value.boolean(True)

    def test_sequence(self):
        values = Value.sequence([Value.integer(0), Value.integer(2)])
        assert values.kind is ValueKind.LIST
        assert values.value == (Value.integer(0), Value.integer(2))

    def test_mapping_ignores_order(self):
        a = Value.mapping({"x": Value.integer(1), "y": Value.text("b")})
        b = Value.mapping({"y": Value.text("b"), "x": Value.integer(1)})
        assert a == b

    def test_mapping_is_read_only(self):
        value = Value.mapping({"x": Value.integer(1)})
        with pytest.raises(TypeError):
            value.value["y"] = Value.integer(2)

    def test_mapping_is_hashable(self):
        a = Value.mapping({"x": Value.integer(1), "y": Value.text("b")})
        b = Value.mapping({"y": Value.text("b"), "x": Value.integer(1)})

        assert hash(a) == hash(b)
        assert hash(Payload.vec([a])) == hash(Payload.vec([b]))
        assert len({OnChange(Payload.one(a)), OnChange(Payload.one(b))}) == 1


class TestPayload:
    """Tests for message payloads."""

    def test_shapes(self):
        assert Payload.none().shape is PayloadShape.NONE
        assert Payload.none().is_none
        assert Payload.one(Value.text("a")).shape is PayloadShape.ONE
        assert Payload.vec([Value.integer(1)]).data == (Value.integer(1),)

    def test_structural_equality(self):
        assert Payload.one(Value.text("hi")) == Payload.one(Value.text("hi"))
        assert Payload.one(Value.text("hi")) != Payload.one(Value.text("ho"))
        assert Payload.vec([]) != Payload.none()


class TestMessages:
    """Tests for the message variants."""

    def test_equality(self):
        payload = Payload.one(Value.text("hi"))
        assert OnChange(payload) == OnChange(payload)
        assert OnChange(payload) != OnSubmit(payload)
        assert OnKey(KeyEvent(Key.ESC)) == OnKey(KeyEvent(Key.ESC))

    def test_frozen(self):
        msg = OnSubmit(Payload.none())
        with pytest.raises(dataclasses.FrozenInstanceError):
            msg.payload = Payload.one(Value.integer(1))

    def test_tagged_message_compares_as_tuple(self):
        tagged = ("INPUT", OnSubmit(Payload.one(Value.text("hi"))))
        assert tagged == ("INPUT", OnSubmit(Payload.one(Value.text("hi"))))


class TestEvents:
    """Tests for input events."""

    def test_from_char(self):
        event = KeyEvent.from_char("h")
        assert event == KeyEvent(Key.CHAR, "h", KeyModifiers.NONE)
        assert event.is_char
        assert not event.is_control

    def test_control(self):
        event = KeyEvent.from_char("c", KeyModifiers.CONTROL)
        assert event.is_control
        assert str(event) == "control+c"

    def test_str(self):
        assert str(KeyEvent(Key.ENTER)) == "enter"
        assert str(KeyEvent(Key.FUNCTION, "5")) == "f5"
        assert str(KeyEvent(Key.LEFT, modifiers=KeyModifiers.SHIFT | KeyModifiers.ALT)) == "shift+alt+left"

    def test_other_events(self):
        assert ResizeEvent(80, 24) == ResizeEvent(80, 24)
        assert PasteEvent("abc").text == "abc"
