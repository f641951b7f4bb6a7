from maakit.dispatcher import Dispatcher


def test_register_returns_ids_above_base_and_increasing():
    dispatcher = Dispatcher()
    first = dispatcher.register_observer([])
    second = dispatcher.register_observer([])
    assert first > 400_000_000
    assert second > first


def test_register_none_is_refused():
    dispatcher = Dispatcher()
    assert dispatcher.register_observer(None) == 0


def test_dispatch_reaches_observers_in_registration_order():
    dispatcher = Dispatcher()
    calls = []
    dispatcher.register_observer("first")
    dispatcher.register_observer("second")
    dispatcher.dispatch(calls.append)
    assert calls == ["first", "second"]


def test_unregister_stops_dispatch():
    dispatcher = Dispatcher()
    calls = []
    keep = dispatcher.register_observer("keep")
    drop = dispatcher.register_observer("drop")
    assert dispatcher.unregister_observer(drop) is True
    assert dispatcher.unregister_observer(drop) is False
    dispatcher.dispatch(calls.append)
    assert calls == ["keep"]
    assert keep != drop


def test_unregister_unknown_id():
    dispatcher = Dispatcher()
    assert dispatcher.unregister_observer(12345) is False


def test_clear_observers_empties_registry():
    dispatcher = Dispatcher()
    calls = []
    dispatcher.register_observer("a")
    dispatcher.register_observer("b")
    dispatcher.clear_observers()
    dispatcher.dispatch(calls.append)
    assert calls == []


def test_ids_are_unique_across_dispatchers():
    one, two = Dispatcher(), Dispatcher()
    ids = [one.register_observer(object()), two.register_observer(object())]
    assert ids[1] > ids[0]


def test_falsy_observers_are_still_dispatched():
    dispatcher = Dispatcher()
    sink = []
    dispatcher.register_observer(sink)
    dispatcher.dispatch(lambda ob: ob.append(1))
    assert sink == [1]


def test_dispatch_none_calls_nothing():
    dispatcher = Dispatcher()
    sink = []
    dispatcher.register_observer(sink)
    dispatcher.dispatch(None)
    assert sink == []