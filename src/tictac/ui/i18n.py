"""Internationalisation strings for the UI.

Usage::

    from tictac.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_restart)        # "Заново"
    print(t().status_turn.format(mark="X"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str

    status_turn: str  # "Player {mark}'s turn"
    status_wins: str  # "Player {mark} wins!"
    status_draw: str

    # ── Buttons ──────────────────────────────────────────────────────────
    btn_restart: str


_EN = Strings(
    window_title="Tic-Tac-Toe",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    status_turn="Player {mark}'s turn",
    status_wins="Player {mark} wins!",
    status_draw="It's a draw.",
    btn_restart="Restart",
)

_RU = Strings(
    window_title="Крестики-нолики",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    status_turn="Ход игрока {mark}",
    status_wins="Игрок {mark} победил!",
    status_draw="Ничья.",
    btn_restart="Заново",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
