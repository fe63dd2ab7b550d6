"""
Engine configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path

PLAYER_KINDS = ("auto", "manual")


@dataclass
class EngineConfig:
    """Configuration for the engine and its text interface.

    Search settings, player assignment and logging live here so a session
    can be reproduced from one object.
    """

    # Search
    max_depth: int = 4
    """Alpha-beta depth D; the engine looks D + 1 plies ahead"""

    # Players
    red_player: str = "manual"
    """Who plays Red: 'manual' (commands) or 'auto' (engine)"""

    blue_player: str = "auto"
    """Who plays Blue: 'manual' (commands) or 'auto' (engine)"""

    # Logging
    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_dir: Path = field(default_factory=lambda: Path.home() / ".ataxx_engine")
    """Directory holding engine.log"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir)

        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

        for name in ("red_player", "blue_player"):
            kind = getattr(self, name)
            if kind not in PLAYER_KINDS:
                raise ValueError(f"{name} should be one of {PLAYER_KINDS}, got {kind!r}")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Search: max_depth={self.max_depth}\n"
            f"  Players: red={self.red_player}, blue={self.blue_player}\n"
            f"  Logging: debug={self.debug}, dir={self.log_dir}\n"
            f")"
        )
