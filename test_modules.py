"""
Tests for the TicTacToe logic modules: board, turns, win checking,
move validation and scores.
Run with: pytest
"""

import numpy as np
import pytest

from logic.board import Board, Mark
from logic.errors import CellOccupied, GameAlreadyOver, InvalidCoordinate
from logic.game_session import GameSession
from logic.move_validator import MoveValidator
from logic.score_ledger import ScoreLedger
from logic.turn_tracker import TurnTracker
from logic.win_checker import Outcome, OutcomeStatus, WinChecker, evaluate


X, O, _ = Mark.X, Mark.O, Mark.EMPTY


def make_board(grid):
    """Build a Board from a 3x3 list of marks."""
    board = Board()
    for row, marks in enumerate(grid):
        for col, mark in enumerate(marks):
            if mark is not Mark.EMPTY:
                board.set_cell(row, col, mark)
    return board


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert all(board.get_cell(r, c) is Mark.EMPTY for r in range(3) for c in range(3))
    assert not board.is_full()
    assert len(board.get_empty_cells()) == 9


def test_set_and_get_cell():
    board = Board()
    board.set_cell(1, 2, X)
    assert board.get_cell(1, 2) is X
    assert (1, 2) not in board.get_empty_cells()


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0), (0, -1), (1.0, 1), (True, 0)])
def test_invalid_coordinates_rejected(row, col):
    board = Board()
    with pytest.raises(InvalidCoordinate):
        board.set_cell(row, col, X)
    with pytest.raises(InvalidCoordinate):
        board.get_cell(row, col)
    assert len(board.get_empty_cells()) == 9


def test_occupied_cell_is_not_overwritten():
    board = Board()
    board.set_cell(0, 0, X)

    with pytest.raises(CellOccupied) as excinfo:
        board.set_cell(0, 0, O)

    assert excinfo.value.mark is X
    assert board.get_cell(0, 0) is X


def test_cannot_place_empty_mark():
    board = Board()
    with pytest.raises(ValueError):
        board.set_cell(0, 0, Mark.EMPTY)
    with pytest.raises(ValueError):
        board.set_cell(0, 0, "X")


def test_reset_clears_board():
    board = make_board([[X, O, X], [_, O, _], [_, _, _]])
    board.reset()
    assert board.get_empty_cells() == [(r, c) for r in range(3) for c in range(3)]


def test_is_full():
    board = make_board([[O, X, O], [X, O, X], [X, O, X]])
    assert board.is_full()
    assert board.get_empty_cells() == []


def test_to_list():
    board = make_board([[O, X, _], [_, _, _], [_, _, X]])
    assert board.to_list() == [[O, X, _], [_, _, _], [_, _, X]]


def test_snapshot_is_a_copy():
    board = Board()
    snap = board.snapshot()
    board.set_cell(0, 0, X)
    assert snap[0, 0] is Mark.EMPTY
    assert isinstance(snap, np.ndarray)


def test_render():
    board = make_board([[O, X, _], [_, X, _], [_, _, O]])
    assert board.render() == "O|X| \n-----\n |X| \n-----\n | |O"
    assert str(board) == board.render()


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line, mark):
    grid = [[_] * 3 for _row in range(3)]
    for row, col in line:
        grid[row][col] = mark

    outcome = evaluate(grid)

    assert outcome.status is OutcomeStatus.WIN
    assert outcome.winner is mark
    assert outcome.line == line


def test_line_win_with_other_cells_filled():
    board = make_board([
        [X, O, O],
        [O, X, X],
        [O, X, X],
    ])
    outcome = WinChecker().check_outcome(board)
    assert outcome == Outcome.win(X, ((0, 0), (1, 1), (2, 2)))


def test_full_board_without_line_is_draw():
    board = make_board([[O, X, O], [X, O, X], [X, O, X]])
    checker = WinChecker()

    assert checker.check_outcome(board) == Outcome.draw()
    assert checker.check_draw(board)
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None


def test_full_board_with_line_is_win_not_draw():
    board = make_board([[X, X, X], [O, O, X], [X, O, O]])
    outcome = evaluate(board)
    assert outcome.winner is X
    assert not outcome.is_draw


@pytest.mark.parametrize("grid", [
    [[_, _, _], [_, _, _], [_, _, _]],
    [[X, O, _], [_, _, _], [_, _, _]],
    [[X, O, X], [X, O, O], [O, X, _]],
])
def test_incomplete_board_is_undecided(grid):
    outcome = evaluate(grid)
    assert outcome == Outcome.undecided()
    assert not outcome.is_terminal


def test_two_rows_first_row_wins():
    outcome = evaluate([[O, O, O], [_, _, _], [X, X, X]])
    assert outcome.winner is O
    assert outcome.line == ((0, 0), (0, 1), (0, 2))


def test_two_columns_leftmost_wins():
    outcome = evaluate([[X, _, O], [X, _, O], [X, _, O]])
    assert outcome.winner is X
    outcome = evaluate([[O, _, X], [O, _, X], [O, _, X]])
    assert outcome.winner is O


def test_evaluate_has_no_side_effects():
    board = make_board([[X, X, _], [O, O, _], [_, _, _]])
    first = evaluate(board)
    second = evaluate(board)
    assert first == second == Outcome.undecided()
    assert len(board.get_empty_cells()) == 5


def test_outcome_describe():
    assert Outcome.win(O).describe() == "O wins"
    assert Outcome.draw().describe() == "draw"
    assert Outcome.undecided().describe() == "in progress"


# ==================== TURN TRACKER ====================

def test_toggle_twice_returns_to_start():
    turns = TurnTracker(O)
    assert turns.toggle() is X
    assert turns.toggle() is O
    assert turns.current() is O


def test_turn_listener_gets_new_mark():
    seen = []
    turns = TurnTracker(X, on_change=seen.append)

    turns.toggle()
    turns.toggle()
    turns.reset()

    assert seen == [O, X, X]


def test_reset_goes_back_to_starting_mark():
    turns = TurnTracker(X)
    turns.toggle()
    assert turns.reset() is X


def test_reset_with_other_mark_applies_once():
    turns = TurnTracker(X)
    assert turns.reset(O) is O
    assert turns.current() is O
    turns.toggle()
    assert turns.reset() is X
    assert turns.starting_mark is X


def test_toggle_without_notify():
    seen = []
    turns = TurnTracker(X, on_change=seen.append)

    assert turns.toggle(notify=False) is O
    assert seen == []

    turns.notify()
    assert seen == [O]


def test_starting_mark_must_be_a_player():
    with pytest.raises(ValueError):
        TurnTracker(Mark.EMPTY)


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(GameSession(), 1, 1)
    assert result.is_valid
    assert result.error is None
    assert result.error_message is None


def test_validator_reports_errors_without_mutating():
    session = GameSession(starting_mark=X)
    session.submit_move(0, 0)
    validator = MoveValidator()

    occupied = validator.validate_move(session, 0, 0)
    assert not occupied.is_valid
    assert isinstance(occupied.error, CellOccupied)
    assert "already occupied" in occupied.error_message

    off_board = validator.validate_move(session, 5, 5)
    assert isinstance(off_board.error, InvalidCoordinate)

    assert session.move_count == 1
    assert session.current_turn is O


def test_validator_after_game_over():
    session = GameSession(starting_mark=X)
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        session.submit_move(row, col)

    validator = MoveValidator()
    result = validator.validate_move(session, 2, 2)

    assert isinstance(result.error, GameAlreadyOver)
    assert validator.get_valid_moves(session) == []


def test_valid_moves_are_empty_cells():
    session = GameSession()
    session.submit_move(1, 1)
    moves = MoveValidator().get_valid_moves(session)
    assert len(moves) == 8
    assert (1, 1) not in moves


# ==================== SCORE LEDGER ====================

def test_ledger_counts_wins_and_draws():
    ledger = ScoreLedger()
    ledger.record(Outcome.win(X))
    ledger.record(Outcome.win(X))
    ledger.record(Outcome.win(O))
    ledger.record(Outcome.draw())

    assert ledger.wins(X) == 2
    assert ledger.wins(O) == 1
    assert ledger.draws == 1
    assert ledger.rounds_played == 4
    assert ledger.as_dict() == {"X": 2, "O": 1, "draws": 1}


def test_ledger_rejects_undecided():
    ledger = ScoreLedger()
    with pytest.raises(ValueError):
        ledger.record(Outcome.undecided())
    assert ledger.rounds_played == 0


def test_ledger_reset():
    ledger = ScoreLedger()
    ledger.record(Outcome.win(O))
    ledger.reset()
    assert ledger.as_dict() == {"X": 0, "O": 0, "draws": 0}
