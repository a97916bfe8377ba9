"""FlicksNow — movie-ticket booking demo with a credential form core."""

__version__ = "0.1.0"
