"""Drawing of a sudoku board onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from sudokugame.board import BOX, SIZE, Board

SELECTION_COLOR = (133, 114, 113, 126)
FIXED_COLOR = (130, 130, 130)
INVALID_COLOR = (230, 41, 55)
TEXT_COLOR = (0, 0, 0)
LINE_COLOR = (0, 0, 0)
SELECTED_ALPHA = 126
OPAQUE = 255
THIN_LINE = 3
THICK_LINE = 5
BORDER_WIDTH = 6
FONT_SCALE = 0.8


def _fill(surface: pygame.Surface, area: pygame.Rect, color: tuple[int, ...]) -> None:
    """Fill an area with a colour that may be translucent."""
    overlay = pygame.Surface(area.size, pygame.SRCALPHA)
    overlay.fill(color)
    surface.blit(overlay, area.topleft)


class BoardView:
    """Maps a board onto a screen rectangle and draws it there."""

    def __init__(self, rect, font: pygame.font.Font | None = None) -> None:
        self.rect = pygame.Rect(rect)
        if self.rect.width <= 0 or self.rect.height <= 0:
            raise ValueError(f"board rectangle must have a positive size, got {self.rect}")
        self.cell_width = self.rect.width / SIZE
        self.cell_height = self.rect.height / SIZE
        self.font_size = max(1, int(self.cell_height * FONT_SCALE))
        self.font = font

    def cell_at(self, x: float, y: float) -> tuple[int, int] | None:
        """Return the (row, col) under a screen point, or None outside the board."""
        if not (self.rect.x <= x < self.rect.right and self.rect.y <= y < self.rect.bottom):
            return None
        row = min(int((y - self.rect.y) / self.cell_height), SIZE - 1)
        col = min(int((x - self.rect.x) / self.cell_width), SIZE - 1)
        return row, col

    def draw(self, surface: pygame.Surface, board: Board) -> None:
        """Draw highlights, digits, grid lines and the border."""
        font = self._font()
        digit_width, digit_height = font.size("0")

        for row in range(SIZE):
            top = self.rect.y + self.cell_height * row
            for col in range(SIZE):
                left = self.rect.x + self.cell_width * col
                area = pygame.Rect(
                    int(left), int(top), math.ceil(self.cell_width), math.ceil(self.cell_height)
                )
                selected = (row, col) == (board.selected_row, board.selected_col)
                if selected:
                    _fill(surface, area, SELECTION_COLOR)

                cell = board[row, col]
                if cell.is_empty:
                    continue

                alpha = SELECTED_ALPHA if selected else OPAQUE
                if cell.fixed:
                    _fill(surface, area, (*FIXED_COLOR, alpha))
                if cell.invalid:
                    _fill(surface, area, (*INVALID_COLOR, alpha))

                glyph = font.render(str(cell.value), True, TEXT_COLOR)
                position = (
                    left + (self.cell_width - digit_width) / 2,
                    top + (self.cell_height - digit_height) / 2,
                )
                surface.blit(glyph, position)

        # Lines go on last so highlights never cover them.
        for i in range(1, SIZE):
            width = THICK_LINE if i % BOX == 0 else THIN_LINE
            x = self.rect.x + self.cell_width * i
            pygame.draw.line(surface, LINE_COLOR, (x, self.rect.y), (x, self.rect.bottom), width)
            y = self.rect.y + self.cell_height * i
            pygame.draw.line(surface, LINE_COLOR, (self.rect.x, y), (self.rect.right, y), width)
        pygame.draw.rect(surface, LINE_COLOR, self.rect, BORDER_WIDTH)

    def _font(self) -> pygame.font.Font:
        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, self.font_size)
        return self.font