"""Game management layer: controller, state machine, policies, settings.

Quick start::

    from chessverse.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    result = ctrl.submit_uci("e2e4")
    if not result.ok:
        print(result.message)
"""

from chessverse.game.controller import GameController, GameEvents
from chessverse.game.interfaces import GamePhase, IGameController, MoveError, MoveResult
from chessverse.game.policies import MovePolicy, promotion_cap_policy
from chessverse.game.settings import GameSettings
from chessverse.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveError",
    "MoveResult",
    "MovePolicy",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
    "promotion_cap_policy",
]
