"""
Graphical interface of Canvas Pong
"""
