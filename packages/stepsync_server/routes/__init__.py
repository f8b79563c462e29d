"""API route modules"""

from stepsync_server.routes import session, state

__all__ = ["session", "state"]
