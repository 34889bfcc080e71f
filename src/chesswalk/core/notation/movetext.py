"""Move-list and PGN text formatting for sequences of SAN moves."""

from __future__ import annotations

from collections.abc import Sequence

from chesswalk.core.enums import Color, GameResult


def format_move_list(
    sans: Sequence[str],
    first_move_number: int = 1,
    first_to_move: Color = Color.WHITE,
) -> str:
    """Group SAN moves into numbered pairs, e.g. ``"1.e4 e5, 2.Nf3"``.

    When black moves first the opening entry stands alone with an ellipsis,
    e.g. ``"7...e5, 8.Nf3 Nc6"``. A trailing white move is rendered without a
    black token.
    """
    groups: list[str] = []
    number = first_move_number
    rest = list(sans)
    if first_to_move == Color.BLACK and rest:
        groups.append(f"{number}...{rest[0]}")
        rest = rest[1:]
        number += 1
    for idx in range(0, len(rest), 2):
        pair = rest[idx : idx + 2]
        groups.append(f"{number + idx // 2}.{' '.join(pair)}")
    return ", ".join(groups)


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def pgn_movetext(
    sans: Sequence[str],
    result_token: str,
    first_move_number: int = 1,
    first_to_move: Color = Color.WHITE,
) -> str:
    """Build PGN movetext from SAN moves and a result token."""
    parts: list[str] = []
    number = first_move_number
    white = first_to_move == Color.WHITE
    for ply, san in enumerate(sans):
        if white:
            parts.append(f"{number}.")
        elif ply == 0:
            parts.append(f"{number}...")
        parts.append(san)
        if not white:
            number += 1
        white = not white
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: dict[str, str],
    sans: Sequence[str],
    result_token: str,
    first_move_number: int = 1,
    first_to_move: Color = Color.WHITE,
) -> str:
    """Build a single-game PGN document."""
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext(sans, result_token, first_move_number, first_to_move))
    lines.append("")
    return "\n".join(lines)
