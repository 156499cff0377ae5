"""State of a file chooser window.

Directory listing is done by worker threads. The results reach the GUI
thread through queued events.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from . import filesystem
from .events import CallbackRegisterer
from .filesystem import FileObject
from .locks import CASLock
from .threads import CountedThreads


class Observer(ABC):
    """Something that wants to hear when a subject changes."""

    @abstractmethod
    def update(self, subject: Any) -> None:
        """React to a change of subject."""


class InternalMessageType(Enum):
    FILE_OBJECTS_READ = 0
    FILE_CHOSEN = 1


@dataclass(frozen=True)
class FileWindowModelInternalMessage:
    """Sent from the workers to the model itself."""

    type: InternalMessageType


class FileWindowMessageType(Enum):
    FILE_CHOSEN = 0


@dataclass(frozen=True)
class FileWindowMessage:
    """Sent to everyone interested in the chosen file."""

    type: FileWindowMessageType
    file_name: str


def _internal_callback(model: "FileWindowModel", message: FileWindowModelInternalMessage) -> bool:
    return model.internal_callback(message)


class FileWindowModel:
    """Holds the browsed directory, its entries and the selection.

    The directory, its entries and the chosen file name are changed by
    workers while holding the model lock. The open flag and the selection
    belong to the GUI thread.
    """

    def __init__(
        self,
        model_lock: CASLock,
        event_lock: CASLock,
        file_lock: CASLock,
        message_registerer: CallbackRegisterer,
        internal_registerer: CallbackRegisterer,
        threads: CountedThreads,
    ) -> None:
        self._model_lock = model_lock
        self._event_lock = event_lock
        self._file_lock = file_lock
        self._message_registerer = message_registerer
        self._internal_registerer = internal_registerer
        self._threads = threads

        self._file_objects: List[FileObject] = []
        self._directory = ""
        self._directory_name = ""
        self._file_name = ""

        self._open = False
        self._object_selected = False
        self._selected_object_number = 0
        self._observers: List[Observer] = []

        internal_registerer.register_listener(self, _internal_callback)

    def close(self) -> None:
        """Stop listening to internal messages."""
        self._internal_registerer.unregister_listener(self)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unregister_observer(self, observer: Observer) -> None:
        for position, known in enumerate(self._observers):
            if known is observer:
                del self._observers[position]
                return

    def _notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self)

    def internal_callback(self, message: FileWindowModelInternalMessage) -> bool:
        """Apply a worker's message in the GUI thread."""
        if message.type is InternalMessageType.FILE_OBJECTS_READ:
            self._object_selected = False
            self._selected_object_number = 0
            self._notify_observers()
        elif message.type is InternalMessageType.FILE_CHOSEN:
            self._open = False
            self._notify_observers()
        return True

    def open(self) -> None:
        self._open = True

    def is_open(self) -> bool:
        return self._open

    def is_object_selected(self) -> bool:
        return self._object_selected

    def selected_object_number(self) -> int:
        return self._selected_object_number

    def select_object(self, number: int) -> None:
        self._object_selected = True
        self._selected_object_number = number
        self._notify_observers()

    def advance(self) -> None:
        """Enter the selected entry in a worker thread, if one is selected."""
        if self._object_selected:
            self._threads.spawn(self.worker_advance, self._selected_object_number)

    def go_back(self) -> None:
        self._threads.spawn(self.worker_go_back)

    def init_data(self) -> None:
        self._threads.spawn(self.worker_init_data)

    def _read_directory(self) -> None:
        try:
            self._file_objects = filesystem.list_file_objects(self._directory)
        except OSError:
            self._file_objects = []
        self._directory_name = self._directory

    def _send_internal(self, message_type: InternalMessageType) -> None:
        with self._event_lock:
            self._internal_registerer.notify(FileWindowModelInternalMessage(message_type))

    def worker_advance(self, object_number: int) -> None:
        """Enter a directory or drive, or choose a file."""
        with self._model_lock:
            if not 0 <= object_number < len(self._file_objects):
                return
            chosen = self._file_objects[object_number]

            if chosen.directory or chosen.drive:
                with self._file_lock:
                    try:
                        self._directory = filesystem.advance(self._directory, chosen)
                    except ValueError:
                        pass
                    self._read_directory()
                self._send_internal(InternalMessageType.FILE_OBJECTS_READ)
            else:
                with self._file_lock:
                    try:
                        self._file_name = filesystem.advance(self._directory, chosen)
                    except ValueError:
                        self._file_name = self._directory
                message = FileWindowMessage(FileWindowMessageType.FILE_CHOSEN, self._file_name)
                with self._event_lock:
                    self._internal_registerer.notify(
                        FileWindowModelInternalMessage(InternalMessageType.FILE_CHOSEN)
                    )
                    self._message_registerer.notify(message)

    def worker_go_back(self) -> None:
        with self._model_lock:
            with self._file_lock:
                self._directory = filesystem.go_back(self._directory)
                self._read_directory()
            self._send_internal(InternalMessageType.FILE_OBJECTS_READ)

    def worker_init_data(self) -> None:
        with self._model_lock:
            with self._file_lock:
                self._directory = filesystem.current_directory()
                self._read_directory()
            self._send_internal(InternalMessageType.FILE_OBJECTS_READ)

    def file_objects(self) -> List[FileObject]:
        """A copy of the entries; the model lock must be held."""
        return list(self._file_objects)

    def directory_name(self) -> str:
        return self._directory_name

    def file_name(self) -> str:
        return self._file_name