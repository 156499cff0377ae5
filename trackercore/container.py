"""Containers that announce changes to their contents through a registerer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .events import CallbackRegisterer


class ContainerAction(Enum):
    """What happened to a container's items."""

    NONE = 0
    CONTAINER_DESTRUCTION = 1
    CONTAINER_ADD = 2
    CONTAINER_ERASE = 3
    CONTAINER_CLEAR = 4


@dataclass
class ContainerChange:
    """A change of one kind of item at one position."""

    type_name: str = ""
    action: ContainerAction = ContainerAction.NONE
    index: int = 0

    def set(self, type_name: str, action: ContainerAction, index: int) -> None:
        self.type_name = type_name
        self.action = action
        self.index = index

    def zero(self) -> None:
        """Reset to the empty change."""
        self.set("", ContainerAction.NONE, 0)


@dataclass(eq=False)
class ContainerChangeEvent:
    """Event data sent to listeners when a container changes."""

    change: ContainerChange
    container: "Container"


class Container(ABC):
    """Something that holds items of named kinds and reports changes."""

    def __init__(self, registerer: CallbackRegisterer) -> None:
        self.registerer = registerer

    @abstractmethod
    def item_amount(self, type_name: str) -> int:
        """Number of items of the given kind."""

    @abstractmethod
    def child_container(self, type_name: str, index: int) -> Optional["Container"]:
        """The container held at index among items of the given kind, if any."""

    def notify(self, change: ContainerChange) -> None:
        """Queue a change event for every listener of the registerer."""
        self.registerer.notify(ContainerChangeEvent(change, self))