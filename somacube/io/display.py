"""Terminal rendering of pieces and solved boards."""

from __future__ import annotations

from typing import Dict, List, Optional

from somacube.config import CFG
from somacube.core.board import Board
from somacube.core.model import Block, Color
from somacube.core.piece import Piece
from somacube.core.placement import Placement

# ANSI escape codes
ANSI_RESET = "\033[0m"

ANSI_COLORS: Dict[Color, str] = {
    Color.RED: "\033[31m",
    Color.YELLOW: "\033[33m",
    Color.BLUE: "\033[34m",
    Color.WHITE: "\033[37m",
    Color.GREEN: "\033[32m",
    Color.CYAN: "\033[36m",
    Color.MAGENTA: "\033[35m",
}

EMPTY_CELL = "."


def colored(text: str, color: Color, enabled: Optional[bool] = None) -> str:
    if enabled is None:
        enabled = CFG.USE_COLOR
    if not enabled:
        return text
    return f"{ANSI_COLORS[color]}{text}{ANSI_RESET}"


def piece_summary(piece: Piece, color: Optional[bool] = None) -> str:
    """``char_id size name orientations placements`` on one line."""
    return (
        f"{piece.char_id} {piece.size} {colored(piece.name, piece.color, color)} "
        f"{len(piece.orientations)} {len(piece.placements)}"
    )


def render_solution(board: Board, placement: Placement, color: Optional[bool] = None) -> str:
    """One block of rows per z layer, bottom layer first."""
    grid = board.grid
    pieces = board.by_id()

    s = grid.size
    out: List[str] = []
    for z in range(s):
        out.append(f"z={z}")
        for y in range(s):
            row = []
            for x in range(s):
                pid = placement.owner_of(grid.index(Block(x, y, z)))
                if pid is None:
                    row.append(EMPTY_CELL)
                else:
                    piece = pieces[pid]
                    row.append(colored(piece.char_id, piece.color, color))
            out.append(" ".join(row))
    return "\n".join(out)


def render_header(board: Board) -> str:
    return f"{board.name} {board.grid.size}"
