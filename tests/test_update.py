# =============================================================================
# Tests for the update loop
# =============================================================================

from realm_tui.core.msg import OnChange, Payload, Value
from realm_tui.update import run_update


def _tag(n):
    return (f"C{n}", OnChange(Payload.one(Value.integer(n))))


class TestRunUpdate:
    """Tests for run_update."""

    def test_single_call_for_none(self):
        calls = []

        def reducer(msg):
            calls.append(msg)
            return None

        assert run_update(reducer, None) == 1
        assert calls == [None]

    def test_follows_chain_in_order(self):
        calls = []

        def reducer(msg):
            calls.append(msg)
            if msg is None:
                return _tag(0)
            n = msg[1].payload.data.value
            return _tag(n + 1) if n < 2 else None

        assert run_update(reducer, None) == 4
        assert calls == [None, _tag(0), _tag(1), _tag(2)]

    def test_long_chain_does_not_recurse(self):
        limit = 100_000

        def reducer(msg):
            n = msg[1].payload.data.value
            return _tag(n + 1) if n < limit else None

        assert run_update(reducer, _tag(0)) == limit + 1

    def test_model_method_as_reducer(self):
        class Model:
            def __init__(self):
                self.seen = []

            def update(self, msg):
                self.seen.append(msg)
                return None

        model = Model()
        run_update(model.update, _tag(7))
        assert model.seen == [_tag(7)]
