"""Game management layer - the board engine and its value types.

Quick start::

    from tictac.game import BoardEngine

    engine = BoardEngine()
    result = engine.place_mark(4)
    if not result.accepted:
        print(result.rejection)
    print(engine.get_state().status)
"""

from tictac.game.engine import BoardEngine, GameEvents
from tictac.game.interfaces import IBoardEngine, MoveRejection
from tictac.game.state import GameSnapshot, MoveResult

__all__ = [
    # Interfaces
    "IBoardEngine",
    "MoveRejection",
    # Concrete
    "BoardEngine",
    "GameEvents",
    "GameSnapshot",
    "MoveResult",
]
