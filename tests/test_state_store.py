from schemagen.utils.state_store import State


def test_set_notifies_callbacks():
    state = State(1)
    calls = []
    state.bind_callback(lambda: calls.append(state.value))

    state.set(2)
    state.value = 3

    assert calls == [2, 3]


def test_callbacks_run_in_bind_order():
    state = State("a")
    calls = []
    state.bind_callback(lambda: calls.append("first"))
    state.bind_callback(lambda: calls.append("second"))

    state.set("b")

    assert calls == ["first", "second"]
    assert state.value == "b"
