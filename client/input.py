import pygame


class InputHandler:
    def __init__(self, game, camera):
        self.game = game
        self.camera = camera

    def handle_event(self, event):
        """Handle one pygame event."""
        gui = self.game.gui

        # --- 1. Lens bar buttons (pygame_gui) ---
        if gui.lens_bar.process_event(event):
            return None

        # --- 2. Mouse hover ---
        if event.type == pygame.MOUSEMOTION:
            self.game.on_mouse_motion(event.pos, self.camera.get_offset())

        # --- 3. Global keyboard / quit handling ---
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return "quit"
            if event.key == pygame.K_l:
                self.game.toggle_lens()
            elif event.key == pygame.K_t:
                self.game.toggle_tooltips()

        elif event.type == pygame.QUIT:
            return "quit"
        return None

    def handle_keys(self):
        """Handle continuous key state (e.g. movement)."""
        keys = pygame.key.get_pressed()
        self.camera.move(keys)
