"""Health check endpoints shared by every service."""

from newsboard.health.router import router


__all__ = ["router"]
