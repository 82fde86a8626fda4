"""A multiplayer grid shooter: game server and client model."""

__version__ = "0.1.0"