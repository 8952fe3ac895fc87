"""
Engine configuration for Sliding TicTacToe.
All the knobs for search depth, piece quota, and evaluation weights.
"""


class EngineConfig:
    """
    Configuration class for the move-selection engine.

    Class attributes hold the defaults. Pass keyword arguments to
    override a value for a single instance:

        config = EngineConfig(SEARCH_DEPTH=2)
    """

    # ==================== GAME SETTINGS ====================
    # Pieces each side places before the movement phase starts
    MAX_PIECES = 3

    # ==================== SEARCH SETTINGS ====================
    # Plies searched below each candidate move on HARD
    SEARCH_DEPTH = 3

    # ==================== LINE WEIGHTS ====================
    # Own pieces on a winning line
    WIN_SCORE = 1000        # Line already complete
    TWO_IN_LINE = 100       # Two own + one empty
    ONE_IN_LINE = 10        # One own + two empty

    # Opponent pieces on a winning line (subtracted)
    LOSS_SCORE = 1000
    OPP_TWO_IN_LINE = 150   # Heavier than TWO_IN_LINE so blocking wins ties
    OPP_ONE_IN_LINE = 5

    # ==================== POSITION WEIGHTS ====================
    CENTER_VALUE = 10
    CORNER_VALUE = 6
    EDGE_VALUE = 4

    # ==================== MOBILITY ====================
    # Multiplier for (own empty neighbours - opponent empty neighbours)
    MOBILITY_WEIGHT = 5

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise ValueError(f"Unknown config option: {name}")
            setattr(self, name, value)

    def __repr__(self) -> str:
        values = {
            name: getattr(self, name)
            for name in dir(self)
            if name.isupper()
        }
        return f"EngineConfig({values})"
