"""Drive the TradingView Desktop chart page through a caller-supplied page session."""

__version__ = "0.1.0"

__all__ = ["elements", "interaction", "js", "keys", "layouts", "panels", "session", "tools"]