import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from sudokugame.game import Game, GameState, main  # noqa: E402


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _text(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


def _centre(game, row, col):
    view = game.view
    return (
        view.rect.x + view.cell_width * (col + 0.5),
        view.rect.y + view.cell_height * (row + 0.5),
    )


def _quit_events():
    return mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)])


def test_default_layout():
    game = Game()
    assert (game.width, game.height, game.fps) == (900, 900, 60)
    assert game.state is GameState.PUZZLE_BOARD
    assert game.board_rect == pygame.Rect(50, 50, 800, 700)
    assert game.board_created is False


@pytest.mark.parametrize(
    "keys, delta",
    [
        ((pygame.K_LEFT, pygame.K_a, pygame.K_h), (0, -1)),
        ((pygame.K_RIGHT, pygame.K_d, pygame.K_l), (0, 1)),
        ((pygame.K_UP, pygame.K_w, pygame.K_k), (-1, 0)),
        ((pygame.K_DOWN, pygame.K_s, pygame.K_j), (1, 0)),
    ],
)
def test_movement_keys(keys, delta):
    for key in keys:
        game = Game()
        game.board.select(4, 4)
        game.handle_event(_key(key))
        assert (game.board.selected_row, game.board.selected_col) == (4 + delta[0], 4 + delta[1])


def test_movement_stops_at_edge():
    game = Game()
    game.handle_event(_key(pygame.K_LEFT))
    game.handle_event(_key(pygame.K_UP))
    assert (game.board.selected_row, game.board.selected_col) == (0, 0)


def test_text_input_enters_digit():
    game = Game()
    game.board.select(2, 3)
    game.handle_event(_text("7"))
    assert game.board[2, 3].value == 7
    assert game.board[2, 3].invalid is False


def test_non_digit_text_is_ignored():
    game = Game()
    game.handle_event(_text("x"))
    assert game.board[0, 0].is_empty


def test_conflicting_digit_is_flagged():
    game = Game()
    game.handle_event(_text("4"))
    game.handle_event(_key(pygame.K_RIGHT))
    game.handle_event(_text("4"))
    assert game.board[0, 1].invalid is True


@pytest.mark.parametrize("key", [pygame.K_BACKSPACE, pygame.K_DELETE])
def test_erase_keys(key):
    game = Game()
    game.handle_event(_text("3"))
    game.handle_event(_key(key))
    assert game.board[0, 0].is_empty


def test_mouse_click_selects_cell():
    game = Game()
    game.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=_centre(game, 6, 2))
    )
    assert (game.board.selected_row, game.board.selected_col) == (6, 2)


def test_right_click_is_ignored():
    game = Game()
    game.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=_centre(game, 6, 2))
    )
    assert (game.board.selected_row, game.board.selected_col) == (0, 0)


def test_drag_with_left_button_selects():
    game = Game()
    game.handle_event(
        pygame.event.Event(pygame.MOUSEMOTION, buttons=(1, 0, 0), pos=_centre(game, 3, 8))
    )
    assert (game.board.selected_row, game.board.selected_col) == (3, 8)


def test_click_outside_board_keeps_selection():
    game = Game()
    game.board.select(5, 5)
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert (game.board.selected_row, game.board.selected_col) == (5, 5)


@pytest.mark.parametrize(
    "event",
    [pygame.event.Event(pygame.QUIT), pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
)
def test_quit_events_stop_game(event):
    game = Game()
    game.handle_event(event)
    assert game.running is False


def test_run_creates_puzzle():
    game = Game()
    with _quit_events():
        assert game.run() is True
    fixed = [(r, c) for r in range(9) for c in range(9) if game.board[r, c].fixed]
    assert len(fixed) == 21
    assert game.board_created is True


def test_run_solver_board_is_empty():
    game = Game(state=GameState.SOLVER_BOARD)
    with _quit_events():
        assert game.run() is True
    assert all(game.board[r, c].is_empty for r in range(9) for c in range(9))


def test_main_returns_zero():
    with _quit_events():
        assert main([]) == 0