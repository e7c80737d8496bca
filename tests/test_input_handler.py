import pygame

from core.input_handler import InputHandler


def _event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


def test_press_is_fresh_for_one_frame():
    handler = InputHandler()
    handler.handle_event(_event(pygame.MOUSEBUTTONDOWN, pos=(10, 20), button=1))
    assert handler.mouse.pressed and handler.mouse.down
    assert (handler.mouse.x, handler.mouse.y) == (10, 20)
    handler.end_frame()
    assert not handler.mouse.pressed
    assert handler.mouse.down
    handler.handle_event(_event(pygame.MOUSEBUTTONUP, pos=(12, 22), button=1))
    assert not handler.mouse.down


def test_window_positions_map_to_canvas():
    handler = InputHandler(scale=(2.0, 4.0))
    handler.handle_event(_event(pygame.MOUSEMOTION, pos=(50, 25), rel=(0, 0), buttons=(0, 0, 0)))
    assert (handler.mouse.x, handler.mouse.y) == (100.0, 100.0)


def test_other_buttons_are_ignored():
    handler = InputHandler()
    handler.handle_event(_event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=3))
    assert not handler.mouse.pressed


def test_keys():
    handler = InputHandler()
    handler.handle_event(_event(pygame.KEYDOWN, key=pygame.K_w))
    assert handler.is_key_down(pygame.K_UP, pygame.K_w)
    handler.handle_event(_event(pygame.KEYUP, key=pygame.K_w))
    assert not handler.is_key_down(pygame.K_w)


def test_reset():
    handler = InputHandler()
    handler.handle_event(_event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
    handler.handle_event(_event(pygame.KEYDOWN, key=pygame.K_s))
    handler.reset()
    assert not handler.mouse.down
    assert not handler.is_key_down(pygame.K_s)
