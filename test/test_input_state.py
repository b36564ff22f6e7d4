import unittest

import pygame

from belt_sandbox.coord import Coord
from belt_sandbox.input_state import KeyboardState, MouseState


class TestKeyboardState(unittest.TestCase):
    def setUp(self):
        self.keyboard = KeyboardState()

    def test_press(self):
        self.keyboard.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
        self.assertTrue(self.keyboard.is_pressed(pygame.K_r))
        self.assertTrue(self.keyboard.was_pressed(pygame.K_r))
        self.assertFalse(self.keyboard.was_released(pygame.K_r))
        self.assertFalse(self.keyboard.is_pressed(pygame.K_g))

    def test_held_after_clear(self):
        self.keyboard.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
        self.keyboard.clear_momentary_state()
        self.assertTrue(self.keyboard.is_pressed(pygame.K_w))
        self.assertFalse(self.keyboard.was_pressed(pygame.K_w))

    def test_release(self):
        self.keyboard.process_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
        self.keyboard.clear_momentary_state()
        self.keyboard.process_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
        self.assertFalse(self.keyboard.is_pressed(pygame.K_w))
        self.assertTrue(self.keyboard.was_released(pygame.K_w))
        self.assertFalse(self.keyboard.was_pressed(pygame.K_w))

    def test_ignores_other_events(self):
        self.keyboard.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
        self.assertEqual(set(), self.keyboard.state)


class TestMouseState(unittest.TestCase):
    def setUp(self):
        self.mouse = MouseState()

    def test_motion(self):
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20), rel=(10, 20), buttons=(0, 0, 0)))
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(15, 18), rel=(5, -2), buttons=(0, 0, 0)))
        self.assertEqual(Coord(15, 18), self.mouse.position)
        self.assertEqual(Coord(15, 18), self.mouse.mouse_delta)

        self.mouse.clear_momentary_state()
        self.assertEqual(Coord(15, 18), self.mouse.position)
        self.assertEqual(Coord(0.0, 0.0), self.mouse.mouse_delta)

    def test_buttons(self):
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(0, 0)))
        self.assertTrue(self.mouse.is_pressed(pygame.BUTTON_LEFT))
        self.assertTrue(self.mouse.was_pressed(pygame.BUTTON_LEFT))
        self.assertFalse(self.mouse.is_pressed(pygame.BUTTON_RIGHT))

        self.mouse.clear_momentary_state()
        self.assertTrue(self.mouse.is_pressed(pygame.BUTTON_LEFT))
        self.assertFalse(self.mouse.was_pressed(pygame.BUTTON_LEFT))

        self.mouse.process_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=pygame.BUTTON_LEFT, pos=(0, 0)))
        self.assertFalse(self.mouse.is_pressed(pygame.BUTTON_LEFT))
        self.assertTrue(self.mouse.was_released(pygame.BUTTON_LEFT))

    def test_wheel_buttons_ignored(self):
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(0, 0)))
        self.assertFalse(self.mouse.is_pressed(4))

    def test_scroll(self):
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
        self.mouse.process_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=2))
        self.assertEqual(3, self.mouse.scroll_delta)

        self.mouse.clear_momentary_state()
        self.assertEqual(0, self.mouse.scroll_delta)


if __name__ == '__main__':
    unittest.main()
