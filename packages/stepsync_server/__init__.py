"""
StepSync Server

FastAPI application serving the shared sequencer session.
"""

__version__ = "0.1.0"
