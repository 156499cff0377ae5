"""Instruments that hold sample mappings and report changes as a container."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Sized

from .container import Container, ContainerAction, ContainerChange
from .events import CallbackRegisterer


class InstrumentType(Enum):
    MELODY = 0
    DRUMS = 1


class SampleData:
    """How a sample is played by an instrument: note range, envelope and loop."""

    def __init__(self, name: str, sample: Sized) -> None:
        self.sample = sample
        self.name = name
        self.root_note = 0
        self.low_note = 0
        self.high_note = 127
        self.loop_type = 0
        self.attack = 0.0001
        self.decay = 0.1
        self.sustain = 1.0
        self.release = 0.01
        self.loop_start = 0
        self.loop_end = len(sample) - 1
        self.poly = True
        self.portamento = False
        self.portamento_rate = 1.1


class Instrument(Container):
    """A named instrument holding a list of sample mappings."""

    SAMPLE_DATA_TYPE_NAME = "SampleData"

    def __init__(
        self,
        registerer: CallbackRegisterer,
        name: str,
        instrument_type: InstrumentType,
    ) -> None:
        super().__init__(registerer)
        self.name = name
        self.instrument_type = instrument_type
        self._sample_data: List[SampleData] = []

    def _notify(self, action: ContainerAction, index: int) -> None:
        self.notify(ContainerChange(self.SAMPLE_DATA_TYPE_NAME, action, index))

    def sample_data(self, index: int) -> Optional[SampleData]:
        """The mapping at index, or None when out of range."""
        if 0 <= index < len(self._sample_data):
            return self._sample_data[index]
        return None

    def add_sample_data(self, name: str, sample: Any) -> None:
        self._sample_data.append(SampleData(name, sample))
        self._notify(ContainerAction.CONTAINER_ADD, len(self._sample_data) - 1)

    def delete_sample_data(self, index: int) -> None:
        """Remove the mapping at index if present; the change is reported either way."""
        if 0 <= index < len(self._sample_data):
            del self._sample_data[index]
        self._notify(ContainerAction.CONTAINER_ERASE, index)

    def clear_sample_data(self) -> None:
        self._sample_data.clear()
        self._notify(ContainerAction.CONTAINER_CLEAR, 0)

    def release(self) -> None:
        self.clear_sample_data()

    def sample_data_amount(self) -> int:
        return len(self._sample_data)

    def item_amount(self, type_name: str) -> int:
        if type_name == self.SAMPLE_DATA_TYPE_NAME:
            return len(self._sample_data)
        return 0

    def child_container(self, type_name: str, index: int) -> Optional[Container]:
        """The item at index if it is itself a container; sample mappings never are."""
        item = self.sample_data(index) if type_name == self.SAMPLE_DATA_TYPE_NAME else None
        return item if isinstance(item, Container) else None