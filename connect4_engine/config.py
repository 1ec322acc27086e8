"""
Engine configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from connect4_engine.search.selector import Algorithm, validate_depth

DEFAULT_LOG_FILE = Path.home() / ".connect4_engine" / "engine.log"


@dataclass
class EngineConfig:
    """Configuration for the protocol engine.

    Groups the search settings and logging options the engine starts with.
    Search settings can be changed later through setoption.
    """

    # Search
    algorithm: Algorithm = Algorithm.ALPHA_BETA
    """Search strategy: alphabeta, transposition, or mtdf"""

    depth: int = 5
    """Default search depth in plies"""

    tt_max_size: Optional[int] = None
    """Transposition table entry limit (None for unbounded)"""

    # Logging
    log_file: Optional[Path] = DEFAULT_LOG_FILE
    """Log file path (None disables file logging)"""

    debug: bool = True
    """Log at DEBUG level instead of INFO"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.algorithm = Algorithm(self.algorithm)
        validate_depth(self.depth)

        if self.tt_max_size is not None and self.tt_max_size <= 0:
            raise ValueError(f"tt_max_size must be positive, got {self.tt_max_size}")

        if self.log_file is not None:
            self.log_file = Path(self.log_file)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Search: algorithm={self.algorithm.value}, depth={self.depth}\n"
            f"  Table: max_size={self.tt_max_size}\n"
            f"  Logging: file={self.log_file}, debug={self.debug}\n"
            f")"
        )
