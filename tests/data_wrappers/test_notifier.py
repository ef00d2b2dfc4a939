import pytest

from data_wrappers.utils import Notifier


def test_listeners_called_in_order():
    notifier = Notifier()
    calls = []

    notifier.add_listener(lambda: calls.append("first"), "first")
    notifier.add_listener(lambda: calls.append("second"), "second")
    notifier.notify()

    assert calls == ["first", "second"]


def test_add_listener_as_decorator():
    notifier = Notifier()
    called = False

    @notifier.add_listener
    def fn():
        nonlocal called
        called = True

    notifier.notify()

    assert called
    assert callable(fn)


def test_same_name_overwrites():
    notifier = Notifier()
    calls = []

    notifier.add_listener(lambda: calls.append("old"), "render")
    notifier.add_listener(lambda: calls.append("new"), "render")
    notifier.notify()

    assert calls == ["new"]
    assert len(notifier) == 1


def test_remove_listener():
    notifier = Notifier()

    def fn():
        pass

    notifier.add_listener(fn)
    notifier.remove_listener("fn")

    assert len(notifier) == 0

    with pytest.raises(KeyError):
        notifier.remove_listener(fn)


def test_listener_can_remove_itself():
    notifier = Notifier()
    calls = []

    def once():
        calls.append(True)
        notifier.remove_listener(once)

    notifier.add_listener(once)
    notifier.notify()
    notifier.notify()

    assert calls == [True]
