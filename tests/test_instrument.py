import pytest

from trackercore.container import ContainerAction
from trackercore.events import CallbackRegisterer, EventNotifier
from trackercore.instrument import Instrument, InstrumentType, SampleData


@pytest.fixture
def registerer():
    reg = CallbackRegisterer(EventNotifier(32))
    reg.register_listener(None, lambda o, d: True)
    return reg


def _events(registerer):
    notifier = registerer.notifier
    out = []
    while (instance := notifier.next_instance()) is not None:
        out.append(instance.data.change)
    return out


def test_sample_data_defaults():
    sample = [0] * 10
    data = SampleData("kick", sample)
    assert data.name == "kick"
    assert data.sample is sample
    assert data.high_note == 127
    assert data.attack == 0.0001
    assert data.portamento_rate == 1.1
    assert data.poly is True and data.portamento is False
    assert data.loop_start == 0
    assert data.loop_end == len(sample) - 1


def test_add_sample_data_notifies_index(registerer):
    instrument = Instrument(registerer, "piano", InstrumentType.MELODY)
    instrument.add_sample_data("a", [0, 0])
    instrument.add_sample_data("b", [0, 0])
    assert instrument.sample_data_amount() == 2
    assert instrument.sample_data(1).name == "b"
    changes = _events(registerer)
    assert [c.action for c in changes] == [ContainerAction.CONTAINER_ADD] * 2
    assert [c.index for c in changes] == [0, 1]
    assert all(c.type_name == "SampleData" for c in changes)


def test_sample_data_out_of_range_is_none(registerer):
    instrument = Instrument(registerer, "piano", InstrumentType.MELODY)
    assert instrument.sample_data(0) is None


def test_delete_sample_data(registerer):
    instrument = Instrument(registerer, "kit", InstrumentType.DRUMS)
    instrument.add_sample_data("a", [0])
    instrument.add_sample_data("b", [0])
    _events(registerer)
    instrument.delete_sample_data(0)
    assert instrument.sample_data_amount() == 1
    assert instrument.sample_data(0).name == "b"
    (change,) = _events(registerer)
    assert change.action is ContainerAction.CONTAINER_ERASE
    assert change.index == 0


def test_delete_out_of_range_still_notifies(registerer):
    instrument = Instrument(registerer, "kit", InstrumentType.DRUMS)
    instrument.delete_sample_data(5)
    (change,) = _events(registerer)
    assert change.action is ContainerAction.CONTAINER_ERASE
    assert change.index == 5
    assert instrument.sample_data_amount() == 0


def test_release_clears(registerer):
    instrument = Instrument(registerer, "kit", InstrumentType.DRUMS)
    instrument.add_sample_data("a", [0])
    _events(registerer)
    instrument.release()
    assert instrument.sample_data_amount() == 0
    (change,) = _events(registerer)
    assert change.action is ContainerAction.CONTAINER_CLEAR


def test_item_amount_by_type(registerer):
    instrument = Instrument(registerer, "piano", InstrumentType.MELODY)
    instrument.add_sample_data("a", [0])
    assert instrument.item_amount("SampleData") == instrument.sample_data_amount()
    assert instrument.item_amount("Other") == 0
    assert instrument.child_container("SampleData", 0) is None