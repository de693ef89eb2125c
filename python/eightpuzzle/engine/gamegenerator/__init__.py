from eightpuzzle.engine.gamegenerator.generator import (
    DEFAULT_MIX_MOVES,
    GameGenerator,
    MixResult,
)

__all__ = ["DEFAULT_MIX_MOVES", "GameGenerator", "MixResult"]
