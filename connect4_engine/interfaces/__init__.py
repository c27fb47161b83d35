"""
connect4_engine.interfaces - User interfaces for Connect Four

This package contains the terminal interface built on the game engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
