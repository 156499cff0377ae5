"""Key and mouse button state with edge detection between frames."""

from __future__ import annotations

from typing import List, Sequence

MOUSE_BUTTONS = 3


class InputState:
    """Tracks which keys and buttons are down, newly pressed or just released."""

    def __init__(self, key_count: int) -> None:
        if key_count < 0:
            raise ValueError("key_count must not be negative")
        self.key_count = key_count
        self.clear()

    def clear(self) -> None:
        self.key_pressed: List[bool] = [False] * self.key_count
        self.key_released: List[bool] = [False] * self.key_count
        self.key_down: List[bool] = [False] * self.key_count
        self.mouse_button_clicked: List[bool] = [False] * MOUSE_BUTTONS
        self.mouse_button_down: List[bool] = [False] * MOUSE_BUTTONS
        self.mouse_button_released: List[bool] = [False] * MOUSE_BUTTONS
        self.mouse_move_x = 0
        self.mouse_move_y = 0

    @staticmethod
    def _edges(previous: List[bool], current: Sequence[bool]):
        current = [bool(down) for down in current]
        rising = [now and not before for before, now in zip(previous, current)]
        falling = [before and not now for before, now in zip(previous, current)]
        return current, rising, falling

    def update(
        self,
        keys_down: Sequence[bool],
        mouse_buttons_down: Sequence[bool],
        mouse_move_x: int,
        mouse_move_y: int,
    ) -> None:
        """Take a new snapshot of the raw device state."""
        if len(keys_down) != self.key_count:
            raise ValueError(f"expected {self.key_count} key states")
        if len(mouse_buttons_down) != MOUSE_BUTTONS:
            raise ValueError(f"expected {MOUSE_BUTTONS} mouse button states")

        self.key_down, self.key_pressed, self.key_released = self._edges(
            self.key_down, keys_down
        )
        (
            self.mouse_button_down,
            self.mouse_button_clicked,
            self.mouse_button_released,
        ) = self._edges(self.mouse_button_down, mouse_buttons_down)
        self.mouse_move_x = mouse_move_x
        self.mouse_move_y = mouse_move_y