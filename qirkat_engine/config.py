"""
Search configuration.
"""

import os
from dataclasses import dataclass

DEPTH_ENV_VAR = "QIRKAT_SEARCH_DEPTH"


@dataclass
class SearchConfig:
    """Configuration for the minimax search.

    Collects the search settings in one place so the automated player and
    the benchmark tooling agree on defaults.
    """

    max_depth: int = 8
    """Maximum search depth in plies before static evaluation"""

    order_moves: bool = True
    """Search longer capture chains first to improve pruning"""

    log_root_moves: bool = False
    """Log the score of every root move at DEBUG level"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")

        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def from_env(cls, **overrides) -> "SearchConfig":
        """
        Build a config, taking max_depth from QIRKAT_SEARCH_DEPTH when set.

        Raises:
            ValueError: If the environment value is not an integer
        """
        depth = os.environ.get(DEPTH_ENV_VAR)
        if depth and "max_depth" not in overrides:
            try:
                overrides["max_depth"] = int(depth)
            except ValueError:
                raise ValueError(f"{DEPTH_ENV_VAR} must be an integer, got {depth!r}")
        return cls(**overrides)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"SearchConfig(max_depth={self.max_depth}, "
            f"order_moves={self.order_moves}, "
            f"log_root_moves={self.log_root_moves})"
        )


DEFAULT_CONFIG = SearchConfig()
