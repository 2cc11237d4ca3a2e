"""newsboard - gateway, comment store and content filter services."""

__version__ = "0.1.0"
