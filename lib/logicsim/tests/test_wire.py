import pytest

from logicsim import Wire, WireConnection


@pytest.fixture
def wire():
    return Wire("w1")


@pytest.fixture
def call_records():
    return []


def make_callback(call_records, label):
    def callback():
        call_records.append(label)

    return callback


class TestCreate:
    def test(self, wire):
        assert wire.name == "w1"
        assert wire.get_signal() is False
        assert wire.connections == []

    def test_start_value(self):
        wire = Wire(start_value=True)
        assert wire.name is None
        assert wire.get_signal() is True

    @pytest.mark.parametrize("val", [False, True])
    def test_str(self, val):
        wire = Wire("w2", val)
        assert str(wire) == f"Wire<w2 = {val}>"

    def test_str_noname(self):
        assert str(Wire()) == "Wire< = False>"


class TestSetSignal:
    def test_set(self, wire):
        wire.set_signal(True)
        assert wire.get_signal() is True
        wire.set_signal(False)
        assert wire.get_signal() is False

    @pytest.mark.parametrize("val, expected", [(1, True), (0, False), ("", False)])
    def test_coerced(self, wire, val, expected):
        wire.set_signal(val)
        assert wire.get_signal() is expected


class TestAdd:
    def test_immediate_call(self, wire, call_records):
        wire.add(make_callback(call_records, "a"))
        assert call_records == ["a"]

    def test_returns_connection(self, wire, call_records):
        callback = make_callback(call_records, "a")
        connection = wire.add(callback)
        assert isinstance(connection, WireConnection)
        assert connection.call is callback
        assert wire.connections == [connection]

    def test_distinct_connections(self, wire, call_records):
        callback = make_callback(call_records, "a")
        conn1 = wire.add(callback)
        conn2 = wire.add(callback)
        assert conn1 != conn2
        call_records.clear()
        wire.set_signal(True)
        assert call_records == ["a", "a"]

    def test_bad_callback(self, wire):
        msg = "Argument 'callback', 'x' is not callable"
        with pytest.raises(TypeError, match=msg):
            wire.add("x")
        assert wire.connections == []


class TestNotify:
    @pytest.fixture(autouse=True)
    def connected(self, wire, call_records):
        for label in ["a", "b", "c"]:
            wire.add(make_callback(call_records, label))
        # Discard the calls made by 'add'.
        call_records.clear()

    def test_change_calls_most_recent_first(self, wire, call_records):
        wire.set_signal(True)
        assert call_records == ["c", "b", "a"]
        wire.set_signal(False)
        assert call_records == ["c", "b", "a"] * 2

    def test_noop_set(self, wire, call_records):
        wire.set_signal(False)
        assert call_records == []
        wire.set_signal(True)
        call_records.clear()
        wire.set_signal(True)
        assert call_records == []

    def test_remove(self, wire, call_records):
        connection = wire.connections[1]
        wire.remove(connection)
        wire.set_signal(True)
        assert call_records == ["c", "a"]
        # Removing again is harmless.
        wire.remove(connection)
        assert len(wire.connections) == 2

    def test_add_during_notify(self, wire, call_records):
        def adder():
            if wire.get_signal():
                wire.add(make_callback(call_records, "new"))

        wire.add(adder)
        wire.set_signal(True)
        # The new callback is called by its 'add', but not by the ongoing notification.
        assert call_records == ["new", "c", "b", "a"]
        call_records.clear()
        wire.set_signal(False)
        assert call_records == ["new", "c", "b", "a"]


class TestReentrant:
    def test_set_other_wire(self, wire, call_records):
        other = Wire("w2")
        other.add(make_callback(call_records, "other"))
        wire.add(lambda: other.set_signal(wire.get_signal()))
        call_records.clear()
        wire.set_signal(True)
        assert other.get_signal() is True
        assert call_records == ["other"]

    def test_set_self(self, wire, call_records):
        # A callback that turns the wire straight back off.
        wire.add(make_callback(call_records, "seen"))
        wire.add(lambda: wire.set_signal(False))
        call_records.clear()
        wire.set_signal(True)
        assert wire.get_signal() is False
        assert call_records == ["seen", "seen"]
