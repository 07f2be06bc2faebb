"""Rule-based Texas hold'em client: hand state and decision rules, and a TCP game-server client."""

__version__ = "0.1.0"
__all__ = ["client", "strategy"]