"""Game-level settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields


@dataclass
class GameSettings:
    """All configurable rule-handling options for a game."""

    # A pawn move to the last rank without a piece choice becomes a queen.
    # When False such a move is refused with AMBIGUOUS_PROMOTION.
    auto_queen: bool = True

    # Insufficient material, 75-move rule and fivefold repetition end the game.
    automatic_draws: bool = True

    # The side to move may claim the 50-move rule or threefold repetition.
    allow_draw_claims: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> GameSettings:
        """Build settings from a plain dict (e.g. loaded from JSON)."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        values: dict[str, bool] = {}
        for name, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(f"Setting {name!r} must be a boolean, got {value!r}")
            values[name] = value
        return cls(**values)
