from typing import Dict, Set

import pygame

from .coord import Coord

PRESSED = True
RELEASED = False


class KeyboardState:
    def __init__(self):
        self.state: Set[int] = set()
        self.momentary_state: Dict[int, bool] = {}

    def is_pressed(self, key: int) -> bool:
        return key in self.state

    def was_pressed(self, key: int) -> bool:
        return self.momentary_state.get(key) is PRESSED

    def was_released(self, key: int) -> bool:
        return self.momentary_state.get(key) is RELEASED

    def process_event(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            self.momentary_state[event.key] = PRESSED
            self.state.add(event.key)
        elif event.type == pygame.KEYUP:
            self.momentary_state[event.key] = RELEASED
            self.state.discard(event.key)

    def clear_momentary_state(self):
        self.momentary_state.clear()


class MouseState:
    def __init__(self):
        self.button_state: Set[int] = set()
        self.momentary_button_state: Dict[int, bool] = {}
        self.position: Coord[float] = Coord(0.0, 0.0)
        self.mouse_delta: Coord[float] = Coord(0.0, 0.0)
        self.scroll_delta: float = 0.0

    def is_pressed(self, button: int) -> bool:
        return button in self.button_state

    def was_pressed(self, button: int) -> bool:
        return self.momentary_button_state.get(button) is PRESSED

    def was_released(self, button: int) -> bool:
        return self.momentary_button_state.get(button) is RELEASED

    def process_event(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            position = Coord(*event.pos)
            self.mouse_delta = self.mouse_delta + (position - self.position)
            self.position = position
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Wheel clicks are reported through MOUSEWHEEL
            if event.button in (4, 5):
                return
            self.momentary_button_state[event.button] = PRESSED
            self.button_state.add(event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button in (4, 5):
                return
            self.momentary_button_state[event.button] = RELEASED
            self.button_state.discard(event.button)
        elif event.type == pygame.MOUSEWHEEL:
            self.scroll_delta += event.y

    def clear_momentary_state(self):
        self.momentary_button_state.clear()
        self.mouse_delta = Coord(0.0, 0.0)
        self.scroll_delta = 0.0
