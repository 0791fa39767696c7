"""The playable window: input, timing, sound and the side panel."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pygame

from blockfall.game import Game, Key
from blockfall.render import draw_game

WINDOW_WIDTH = 725
WINDOW_HEIGHT = 920
FALL_INTERVAL = 0.2
FPS = 60
FONT_SIZE = 48

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (130, 130, 130)

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


class EventTimer:
    """Fires at most once per interval, measured from the last time it fired."""

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self.last_update = 0.0

    def triggered(self, now: float) -> bool:
        """Tell whether the interval has passed; if so, restart it at ``now``."""
        if now - self.last_update >= self.interval:
            self.last_update = now
            return True
        return False


def key_from_pygame(code: int) -> Key | None:
    """Map a pygame key code to a game key; 0 means no key."""
    if not code:
        return None
    return _KEYS.get(code, Key.OTHER)


def _load_sound(path: Path) -> pygame.mixer.Sound | None:
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        return None


def _play(sound: pygame.mixer.Sound | None) -> None:
    if sound is not None:
        sound.play()


def _start_music(path: Path) -> None:
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except (pygame.error, FileNotFoundError):
        pass


def _load_font(path: str | None) -> pygame.font.Font:
    if path:
        try:
            return pygame.font.Font(path, FONT_SIZE)
        except (pygame.error, FileNotFoundError, OSError):
            pass
    return pygame.font.Font(None, FONT_SIZE)


def _rounded_panel(surface: pygame.Surface, rect: tuple[int, int, int, int]) -> None:
    radius = int(0.3 * min(rect[2], rect[3]) / 2)
    pygame.draw.rect(surface, GRAY, rect, border_radius=radius)


def _draw_frame(surface: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    surface.fill(BLACK)
    surface.blit(font.render("Score", True, WHITE), (520, 75))
    surface.blit(font.render("Next", True, WHITE), (535, 280))
    if game.game_over:
        surface.blit(font.render("Game Over", True, WHITE), (475, 620))
    _rounded_panel(surface, (500, 130, 175, 60))
    score_text = font.render(str(game.score), True, WHITE)
    surface.blit(score_text, (500 + (150 - score_text.get_width()) / 2, 135))
    _rounded_panel(surface, (500, 335, 175, 190))
    draw_game(surface, game)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description="Play a falling-block game.")
    parser.add_argument("--sounds", default="Sounds", help="directory holding the sound files")
    parser.add_argument("--font", default=None, help="TrueType font for the panel text")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tetris Game")
        font = _load_font(args.font)

        sounds = Path(args.sounds)
        audio = pygame.mixer.get_init() is not None
        rotate_sound = _load_sound(sounds / "rotatesound.mp3") if audio else None
        clear_sound = _load_sound(sounds / "clearsound.mp3") if audio else None
        if audio:
            _start_music(sounds / "bgsound.mp3")

        game = Game(
            on_rotate=lambda: _play(rotate_sound),
            on_clear=lambda: _play(clear_sound),
        )
        timer = EventTimer(FALL_INTERVAL)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(key_from_pygame(event.key))
            if not running:
                break
            if timer.triggered(pygame.time.get_ticks() / 1000.0):
                game.move_block_down()
            _draw_frame(surface, font, game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0