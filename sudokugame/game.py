"""The sudoku game window: event handling, main loop and entry point."""

from __future__ import annotations

import argparse
from enum import Enum, auto
from pathlib import Path

import pygame

from sudokugame.board import Board, Direction
from sudokugame.render import BoardView

TITLE = "SUDOKU"
FONT_PATH = Path("res") / "JetBrainsMonoNerdFont-Bold.ttf"
BACKGROUND = (255, 255, 255)
LEFT_PADDING = TOP_PADDING = RIGHT_PADDING = 50
BOTTOM_PADDING = 150
KEY_REPEAT_DELAY_MS = 500
KEY_REPEAT_INTERVAL_MS = 30

_MOVES = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_h: Direction.LEFT,
    pygame.K_l: Direction.RIGHT,
    pygame.K_k: Direction.UP,
    pygame.K_j: Direction.DOWN,
}
_ERASE_KEYS = {pygame.K_BACKSPACE, pygame.K_DELETE}


class GameState(Enum):
    """What the game screen currently shows."""

    START_OPTIONS = auto()
    SOLVER_BOARD = auto()
    PUZZLE_BOARD = auto()


def _load_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if FONT_PATH.is_file():
        try:
            return pygame.font.Font(str(FONT_PATH), size)
        except (OSError, pygame.error):
            pass
    return pygame.font.Font(None, size)


class Game:
    """A sudoku game: a board, its view and the window loop."""

    def __init__(
        self,
        width: int = 900,
        height: int = 900,
        fps: int = 60,
        state: GameState = GameState.PUZZLE_BOARD,
    ) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        self.state = state
        self.board = Board()
        self.board_created = False
        self.running = True
        self.board_rect = pygame.Rect(
            LEFT_PADDING,
            TOP_PADDING,
            width - RIGHT_PADDING - LEFT_PADDING,
            height - BOTTOM_PADDING - TOP_PADDING,
        )
        self.view = BoardView(self.board_rect)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one input event to the game."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._select_at(event.pos)
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self._select_at(event.pos)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in _MOVES:
                self.board.move_selection(_MOVES[event.key])
            elif event.key in _ERASE_KEYS:
                self.board.erase_selected()
        elif event.type == pygame.TEXTINPUT:
            # One character per event, as repeated characters would flag conflicts.
            char = event.text[:1]
            if char.isdigit() and char.isascii():
                self.board.enter_digit(int(char))

    def run(self) -> bool:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
            self.view.font = _load_font(self.view.font_size)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                self._ensure_board()
                for event in pygame.event.get():
                    self.handle_event(event)
                surface.fill(BACKGROUND)
                if self.state is not GameState.START_OPTIONS:
                    self.view.draw(surface, self.board)
                pygame.display.flip()
                clock.tick(self.fps)
        finally:
            pygame.quit()
        return True

    def _ensure_board(self) -> None:
        if self.board_created:
            return
        if self.state is GameState.PUZZLE_BOARD:
            self.board.create_puzzle()
        elif self.state is GameState.SOLVER_BOARD:
            self.board.clear()
        self.board_created = True

    def _select_at(self, pos: tuple[float, float]) -> None:
        cell = self.view.cell_at(*pos)
        if cell is not None:
            self.board.select(*cell)


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="sudokugame", description="A simple sudoku game.")
    parser.parse_args(argv)
    return 0 if Game().run() else 1