"""
Canvas Pong: a human-versus-bot pong on a 2D drawing surface
"""

__version__ = "1.0.0"
