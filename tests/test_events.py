import pytest

from trackercore.events import (
    CallbackInstance,
    CallbackRegisterer,
    ClassIdIssuer,
    EventNotifier,
    NotifierExhausted,
)


class Message:
    def __init__(self, text):
        self.text = text
        self.closed = 0

    def close(self):
        self.closed += 1


class Listener:
    def __init__(self):
        self.received = []

    @staticmethod
    def callback(owner, data):
        owner.received.append(data)
        return True


def test_notify_queues_one_instance_per_listener():
    notifier = EventNotifier(4)
    registerer = CallbackRegisterer(notifier)
    first, second = Listener(), Listener()
    registerer.register_listener(first, Listener.callback)
    registerer.register_listener(second, Listener.callback)
    registerer.notify(Message("hi"))
    assert notifier.pending() == 2
    assert notifier.has_callbacks_for(first)
    assert notifier.has_callbacks_for(second)


def test_instances_delivered_in_order_and_call_listener():
    notifier = EventNotifier(4)
    registerer = CallbackRegisterer(notifier)
    listener = Listener()
    registerer.register_listener(listener, Listener.callback)
    one, two = Message("one"), Message("two")
    registerer.notify(one)
    registerer.notify(two)
    instance = notifier.next_instance()
    assert instance.data is one
    assert instance.call() is True
    assert listener.received == [one]
    assert notifier.next_instance().data is two
    assert notifier.next_instance() is None


def test_blank_instance_call_returns_false():
    assert CallbackInstance().call() is False


def test_exhausted_capacity_raises():
    notifier = EventNotifier(1)
    registerer = CallbackRegisterer(notifier)
    registerer.register_listener(Listener(), Listener.callback)
    registerer.notify(Message("a"))
    with pytest.raises(NotifierExhausted):
        registerer.notify(Message("b"))


def test_returned_instance_can_be_reused():
    notifier = EventNotifier(1)
    registerer = CallbackRegisterer(notifier)
    registerer.register_listener(Listener(), Listener.callback)
    registerer.notify(Message("a"))
    instance = notifier.next_instance()
    notifier.return_instance(instance)
    assert instance.data is None and instance.registerer is None
    registerer.notify(Message("b"))
    assert notifier.pending() == 1


def test_data_disposed_only_after_last_use():
    notifier = EventNotifier(4)
    registerer = CallbackRegisterer(notifier)
    registerer.register_listener(Listener(), Listener.callback)
    registerer.register_listener(Listener(), Listener.callback)
    message = Message("shared")
    registerer.notify(message)
    first = notifier.next_instance()
    assert notifier.data_in_use(message)
    notifier.return_instance(first)
    assert message.closed == 0
    second = notifier.next_instance()
    notifier.return_instance(second)
    assert message.closed == 1
    assert not notifier.data_in_use(message)


def test_next_instance_for_target():
    notifier = EventNotifier(4)
    registerer = CallbackRegisterer(notifier)
    first, second = Listener(), Listener()
    registerer.register_listener(first, Listener.callback)
    registerer.register_listener(second, Listener.callback)
    registerer.notify(Message("x"))
    instance = notifier.next_instance(second)
    assert instance.owner is second
    assert not notifier.has_callbacks_for(second)
    assert notifier.has_callbacks_for(first)
    assert notifier.next_instance(second) is None


def test_try_again_and_new_round_requeue():
    notifier = EventNotifier(2)
    registerer = CallbackRegisterer(notifier)
    listener = Listener()
    registerer.register_listener(listener, Listener.callback)
    message = Message("retry")
    registerer.notify(message)
    instance = notifier.next_instance()
    notifier.try_again(instance)
    assert notifier.pending() == 0
    notifier.new_round()
    assert notifier.pending() == 1
    assert notifier.next_instance() is instance


def test_close_drops_pending_and_disposes_data():
    notifier = EventNotifier(2)
    registerer = CallbackRegisterer(notifier)
    registerer.register_listener(Listener(), Listener.callback)
    registerer.register_listener(Listener(), Listener.callback)
    message = Message("gone")
    registerer.notify(message)
    registerer.close()
    assert notifier.pending() == 0
    assert message.closed == 1
    other = CallbackRegisterer(notifier)
    other.register_listener(Listener(), Listener.callback)
    other.register_listener(Listener(), Listener.callback)
    other.notify(Message("again"))
    assert notifier.pending() == 2


def test_close_keeps_other_registerers_instances():
    notifier = EventNotifier(4)
    keep = CallbackRegisterer(notifier)
    drop = CallbackRegisterer(notifier)
    keeper, dropper = Listener(), Listener()
    keep.register_listener(keeper, Listener.callback)
    drop.register_listener(dropper, Listener.callback)
    keep.notify(Message("k"))
    drop.notify(Message("d"))
    drop.close()
    assert notifier.has_callbacks_for(keeper)
    assert not notifier.has_callbacks_for(dropper)


def test_unregister_listener_stops_notifications():
    notifier = EventNotifier(4)
    registerer = CallbackRegisterer(notifier)
    listener = Listener()
    registerer.register_listener(listener, Listener.callback)
    registerer.unregister_listener(listener)
    registerer.notify(Message("none"))
    assert notifier.pending() == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        EventNotifier(-1)


def test_class_id_issuer():
    issuer = ClassIdIssuer()
    first = issuer.issue("alpha")
    second = issuer.issue("beta")
    assert second == first + 1
    assert issuer.issue("alpha") == first - 1
    assert issuer.issue("beta") == second - 1