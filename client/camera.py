import pygame

PAN_KEYS = {
    pygame.K_w: (0, 1),
    pygame.K_UP: (0, 1),
    pygame.K_s: (0, -1),
    pygame.K_DOWN: (0, -1),
    pygame.K_a: (1, 0),
    pygame.K_LEFT: (1, 0),
    pygame.K_d: (-1, 0),
    pygame.K_RIGHT: (-1, 0),
}


class Camera:
    def __init__(self, screen_width, screen_height, world_width, world_height, speed=10):
        self.offset = [0, 0]  # camera offset (x, y)
        self.speed = speed

        self.screen_width = screen_width
        self.screen_height = screen_height
        self.world_width = world_width
        self.world_height = world_height

    def move(self, keys):
        """Pan with WASD / arrow keys. Returns True if the camera moved."""
        dx = dy = 0
        for key, (kx, ky) in PAN_KEYS.items():
            if keys[key]:
                dx += kx
                dy += ky
        if not (dx or dy):
            return False
        self.offset[0] += max(-1, min(1, dx)) * self.speed
        self.offset[1] += max(-1, min(1, dy)) * self.speed
        self.clamp()
        return True

    def clamp(self):
        # Keep at least part of the map on screen
        min_x = min(0, self.screen_width - self.world_width)
        min_y = min(0, self.screen_height - self.world_height)
        self.offset[0] = max(min(self.offset[0], 0), min_x)
        self.offset[1] = max(min(self.offset[1], 0), min_y)

    def get_offset(self):
        return self.offset[0], self.offset[1]
