"""Detect which king, if any, is in check on an 8x8 board."""

import argparse
import sys
from itertools import chain

_EMPTY_ROW = "........"
_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ALL_DIRECTIONS = _ORTHOGONAL + _DIAGONAL
_KNIGHT = ((1, 2), (-1, 2), (1, -2), (-1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1))
_BLACK_PAWN = ((1, 1), (1, -1))
_WHITE_PAWN = ((-1, 1), (-1, -1))


def _validate(rows):
    board = tuple(rows)
    if len(board) != 8 or any(len(row) != 8 for row in board):
        raise ValueError("a board must have 8 rows of 8 squares")
    return board


def _probe(board, row, col, attacker):
    """Return (square is open, side whose king is hit there or None)."""
    if not (0 <= row < 8 and 0 <= col < 8):
        return False, None
    square = board[row][col]
    if square in ".x":
        return True, None
    if square == "k" and not attacker.islower():
        return False, "black"
    if square == "K" and not attacker.isupper():
        return False, "white"
    return False, None


def _steps(board, row, col, attacker, deltas):
    for dr, dc in deltas:
        _, hit = _probe(board, row + dr, col + dc, attacker)
        if hit:
            return hit
    return None


def _slides(board, row, col, attacker, deltas):
    result = None
    for dr, dc in deltas:
        r, c = row + dr, col + dc
        while True:
            is_open, hit = _probe(board, r, c, attacker)
            if not is_open:
                result = result or hit
                break
            r, c = r + dr, c + dc
    return result


def _attack(board, row, col, piece):
    kind = piece.lower()
    if kind == "q":
        return _slides(board, row, col, piece, _ALL_DIRECTIONS)
    if kind == "r":
        return _slides(board, row, col, piece, _ORTHOGONAL)
    if kind == "b":
        return _slides(board, row, col, piece, _DIAGONAL)
    if kind == "k":
        return _steps(board, row, col, piece, _ALL_DIRECTIONS)
    if kind == "n":
        return _steps(board, row, col, piece, _KNIGHT)
    if kind == "p":
        deltas = _BLACK_PAWN if piece == "p" else _WHITE_PAWN
        return _steps(board, row, col, piece, deltas)
    return None


def king_in_check(board):
    """'black' or 'white' for the first king found in check scanning row by row, else None."""
    board = _validate(board)
    for row, line in enumerate(board):
        for col, piece in enumerate(line):
            hit = _attack(board, row, col, piece)
            if hit:
                return hit
    return None


def read_boards(lines):
    """Yield boards separated by blank lines, stopping at an all-empty board."""
    rows = []
    for line in chain(lines, [""]):
        line = line.rstrip("\r\n")
        if line:
            rows.append(line)
            continue
        if not rows:
            continue
        board = _validate(rows)
        rows = []
        if all(row == _EMPTY_ROW for row in board):
            return
        yield board


def check_reports(boards):
    """Yield one 'Game #n: ...' line per board."""
    for number, board in enumerate(boards, start=1):
        side = king_in_check(board)
        verdict = f"{side} king is in check." if side else "no king is in check."
        yield f"Game #{number}: {verdict}"


def main(argv=None):
    """Read boards from a file or standard input and report checks."""
    parser = argparse.ArgumentParser(prog="algokit-chess", description="Report kings in check.")
    parser.add_argument("file", nargs="?", help="file of boards (default: standard input)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    try:
        for report in check_reports(read_boards(lines)):
            print(report)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0