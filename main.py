"""
Kruskal Maze 3D - first-person textured maze
Find the exit on the right side of each maze to advance to a larger one
"""

import logging
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION, MAZE_SEED, setup_logging
from game.level_manager import LevelManager
from maze.maze_core import print_maze
from renderer3d import Renderer3D
from utils.constants import SCREEN_W, SCREEN_H, FPS, FOV, HUD_LINE_H
from utils.colors import COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM
from utils.helpers import format_time

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Main game class
    """
    def __init__(self, seed=MAZE_SEED):
        pygame.init()

        self.screen_w = SCREEN_W
        self.screen_h = SCREEN_H
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 18)
        self.big_font = pygame.font.SysFont("consolas", 32, bold=True)
        self.running = True

        # Level + renderer
        self.level_manager = LevelManager(seed=seed)
        self.level = self.level_manager.create_level(1)
        self.renderer_3d = Renderer3D(self.screen_w, self.screen_h, fov=FOV)

        # Level-complete banner
        self.message_text = ""
        self.message_timer = 0.0

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_TAB:
            print_maze(self.level.grid, self.level.player.cell)
        elif key == pygame.K_r:
            self.level = self.level_manager.regenerate_current_level()
            self._show_message("NEW MAZE")

    def _show_message(self, text, duration=2.0):
        self.message_text = text
        self.message_timer = duration

    def update(self, dt):
        """Apply input to the viewer, then advance the level"""
        keys = pygame.key.get_pressed()
        player = self.level.player

        # Forward/backward
        forward = 0
        if keys[pygame.K_w]:
            forward = 1
        elif keys[pygame.K_s]:
            forward = -1

        # Strafe left/right
        strafe = 0
        if keys[pygame.K_d]:
            strafe = 1
        elif keys[pygame.K_a]:
            strafe = -1

        # Turning
        turn = 0
        if keys[pygame.K_LEFT]:
            turn = -1
        elif keys[pygame.K_RIGHT]:
            turn = 1

        player.move(forward, strafe, dt)
        if turn != 0:
            player.handle_keyboard_turn(turn, dt)

        if self.message_timer > 0:
            self.message_timer -= dt

        # Regenerate between frames, never while a frame is drawn
        if self.level_manager.update_current_level(dt) == 'complete':
            finished = self.level
            self.level = self.level_manager.next_level()
            self._show_message(f"LEVEL {finished.level_number} DONE  {format_time(finished.time_elapsed)}")

    def render(self):
        """Draw the 3D view and the HUD"""
        self.renderer_3d.render(self.screen, self.level.player, self.level.grid)
        self._draw_hud()

        if self.message_timer > 0:
            text = self.big_font.render(self.message_text, True, COLOR_TEXT_HIGHLIGHT)
            self.screen.blit(text, (self.screen_w // 2 - text.get_width() // 2,
                                    self.screen_h // 2 - text.get_height() // 2))

        pygame.display.flip()

    def _draw_hud(self):
        level = self.level
        best = self.level_manager.get_best_time(level.level_number)
        info_lines = [
            (f"Level {level.level_number}  Maze {level.maze.n}x{level.maze.n}", COLOR_TEXT),
            (f"Time {format_time(level.time_elapsed)}", COLOR_TEXT),
        ]
        if best is not None:
            info_lines.append((f"Best {format_time(best)}", COLOR_TEXT_DIM))
        info_lines.append(("WASD move | Arrows turn | TAB map | R new maze | ESC quit", COLOR_TEXT_DIM))

        for i, (line, color) in enumerate(info_lines):
            text = self.font.render(line, True, color)
            self.screen.blit(text, (10, 10 + i * HUD_LINE_H))

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)
            dt = dt_ms / 1000.0

            self.handle_events()
            if not self.running:
                break
            self.update(dt)
            self.render()

        pygame.quit()


def main():
    """Entry point"""
    setup_logging()
    logger.info("Starting %s v%s", GAME_TITLE, GAME_VERSION)
    game = MazeGame()
    game.run()
    sys.exit()


if __name__ == "__main__":
    main()
