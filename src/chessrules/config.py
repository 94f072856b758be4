"""Rules configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.rules import DEFAULT_MOVE_LIMIT


@dataclass(frozen=True)
class RulesConfig:
    """Tunable rule parameters for a game."""

    # Half-moves without a capture before the game is drawn (100 = 50 moves).
    move_limit: int = DEFAULT_MOVE_LIMIT

    def __post_init__(self) -> None:
        if self.move_limit <= 0:
            raise ValueError(f"move_limit must be positive, got {self.move_limit}")
