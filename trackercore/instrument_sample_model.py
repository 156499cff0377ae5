"""The shared store of samples and instruments, announcing every change."""

from __future__ import annotations

import copy
import heapq
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Set

from .events import CallbackRegisterer
from .locks import CASLock


class IdIssuer:
    """Hands out positive identifiers, reusing the lowest released one first."""

    def __init__(self) -> None:
        self._next = 1
        self._free: List[int] = []
        self._issued: Set[int] = set()

    def issue(self) -> int:
        if self._free:
            value = heapq.heappop(self._free)
        else:
            value = self._next
            self._next += 1
        self._issued.add(value)
        return value

    def release(self, value: int) -> None:
        """Return an identifier; raise ValueError if it is not issued."""
        if value not in self._issued:
            raise ValueError(f"identifier {value} is not issued")
        self._issued.remove(value)
        heapq.heappush(self._free, value)


class MessageType(Enum):
    ADD_INSTRUMENT = 0
    DELETE_INSTRUMENT = 1
    CHANGE_INSTRUMENT = 2
    ADD_SAMPLE = 3
    DELETE_SAMPLE = 4


class InstrumentType(Enum):
    MELODY = 0
    DRUMS = 1


@dataclass(frozen=True)
class InstrumentSampleMessage:
    """What changed in the model; an id is None when it does not apply."""

    type: MessageType
    instrument_id: Optional[int]
    sample_id: Optional[int]


class Sample:
    """Loaded audio: signed 16-bit values and a length in frames per channel."""

    def __init__(self, issuer: IdIssuer, name: str) -> None:
        self.id: Optional[int] = issuer.issue()
        self.name = name
        self.data: Optional[List[int]] = None
        self.length = 0
        self.sample_rate = 1

    def __len__(self) -> int:
        return self.length

    def __copy__(self) -> Sample:
        new = Sample.__new__(Sample)
        new.__dict__.update(self.__dict__)
        new.data = None if self.data is None else list(self.data)
        return new


@dataclass
class SampleDataParameters:
    root_note: int = 0
    low_note: int = 0
    high_note: int = 127
    loop_type: int = 0
    attack: float = 0.0001
    decay: float = 0.1
    sustain: float = 1.0
    release: float = 0.01
    loop_start: int = 0
    loop_end: int = 0
    poly: bool = True
    portamento: bool = False
    portamento_rate: float = 1.1


class SampleData:
    """A mapping of one sample into an instrument; sample may be None."""

    def __init__(self, issuer: IdIssuer, sample: Optional[Sample]) -> None:
        self.sample_data_id: Optional[int] = issuer.issue()
        self.sample_id = sample.id if sample is not None else None
        self.parameters = SampleDataParameters()
        if sample is not None:
            self.parameters.loop_end = len(sample) - 1

    def __copy__(self) -> SampleData:
        new = SampleData.__new__(SampleData)
        new.sample_data_id = self.sample_data_id
        new.sample_id = self.sample_id
        new.parameters = replace(self.parameters)
        return new


class Instrument:
    """A named instrument holding copies of its sample mappings."""

    def __init__(
        self, issuer: IdIssuer, name: str, instrument_type: InstrumentType
    ) -> None:
        self._issuer = issuer
        self.id: Optional[int] = issuer.issue()
        self.name = name
        self.instrument_type = instrument_type
        self._sample_data: List[SampleData] = []

    def __copy__(self) -> Instrument:
        new = Instrument.__new__(Instrument)
        new._assign_from(self)
        return new

    def _assign_from(self, other: Instrument) -> None:
        self._issuer = other._issuer
        self.id = other.id
        self.name = other.name
        self.instrument_type = other.instrument_type
        self._sample_data = [copy.copy(data) for data in other._sample_data]

    def add_sample_data(self, data: SampleData) -> None:
        """Store a copy, replacing a mapping with the same id if there is one."""
        stored = copy.copy(data)
        for position, held in enumerate(self._sample_data):
            if held.sample_data_id == data.sample_data_id:
                self._sample_data[position] = stored
                return
        self._sample_data.append(stored)

    def sample_data_amount(self) -> int:
        return len(self._sample_data)

    def sample_data_at(self, index: int) -> SampleData:
        return self._sample_data[index]

    def sample_data_by_id(self, sample_data_id: int) -> Optional[SampleData]:
        return next(
            (d for d in self._sample_data if d.sample_data_id == sample_data_id), None
        )

    def return_id(self) -> None:
        """Give the identifier back to the issuer; the id becomes None."""
        if self.id is not None:
            self._issuer.release(self.id)
            self.id = None


class InstrumentSampleModel:
    """Owns samples and instruments and reports changes to listeners."""

    def __init__(self, event_lock: CASLock, registerer: CallbackRegisterer) -> None:
        self._event_lock = event_lock
        self._registerer = registerer
        self._samples: List[Sample] = []
        self._instruments: List[Instrument] = []

    def _send(
        self,
        message_type: MessageType,
        instrument_id: Optional[int],
        sample_id: Optional[int],
    ) -> None:
        message = InstrumentSampleMessage(message_type, instrument_id, sample_id)
        with self._event_lock:
            self._registerer.notify(message)

    def add_sample(self, sample: Sample) -> None:
        self._samples.append(sample)
        self._send(MessageType.ADD_SAMPLE, None, sample.id)

    def add_sample_data(self, instrument_id: int, data: SampleData) -> None:
        instrument = self.instrument_by_id(instrument_id)
        if instrument is None:
            return
        instrument.add_sample_data(data)
        self._send(MessageType.CHANGE_INSTRUMENT, instrument_id, None)

    def add_instrument(self, instrument: Instrument) -> None:
        self._instruments.append(instrument)
        self._send(MessageType.ADD_INSTRUMENT, instrument.id, None)

    def delete_instrument(self, index: int) -> None:
        """Remove the instrument at index; raise IndexError if out of range."""
        instrument = self._instruments.pop(index)
        self._send(MessageType.DELETE_INSTRUMENT, instrument.id, None)

    def instrument_amount(self) -> int:
        return len(self._instruments)

    def instrument_at(self, index: int) -> Optional[Instrument]:
        if 0 <= index < len(self._instruments):
            return self._instruments[index]
        return None

    def instrument_by_id(self, instrument_id: int) -> Optional[Instrument]:
        return next((i for i in self._instruments if i.id == instrument_id), None)

    def change_instrument(self, instrument: Instrument) -> None:
        """Overwrite the stored instrument with the same id by a copy of the given one."""
        stored = self.instrument_by_id(instrument.id)
        if stored is None:
            return
        stored._assign_from(instrument)
        self._send(MessageType.CHANGE_INSTRUMENT, instrument.id, None)

    def sample_amount(self) -> int:
        return len(self._samples)

    def sample_at(self, index: int) -> Optional[Sample]:
        if 0 <= index < len(self._samples):
            return self._samples[index]
        return None