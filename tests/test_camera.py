from collections import defaultdict

import pygame

from client.camera import Camera


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


def test_pan_and_clamp():
    camera = Camera(100, 100, 300, 200, speed=10)
    assert camera.move(pressed()) is False

    assert camera.move(pressed(pygame.K_d))
    assert camera.get_offset() == (-10, 0)

    # opposite keys cancel out
    assert camera.move(pressed(pygame.K_a, pygame.K_d)) is False

    for _ in range(50):
        camera.move(pressed(pygame.K_RIGHT, pygame.K_DOWN))
    assert camera.get_offset() == (-200, -100)

    camera.move(pressed(pygame.K_w))
    assert camera.get_offset() == (-200, -90)
