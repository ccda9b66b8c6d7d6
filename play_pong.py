#!/usr/bin/env python3
"""
Main script to launch Canvas Pong with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    missing = [name for name in ("pygame", "pydantic", "numpy") if importlib.util.find_spec(name) is None]
    if missing:
        print("Missing dependencies: " + ", ".join(missing))
        print("Install them with: pip install " + " ".join(missing))
        sys.exit(1)

    from canvas_pong.gui.game_app import main
    from canvas_pong.utils.config import game_config

    print("=== CANVAS PONG ===")
    print("Beat the computer to " + str(game_config.WIN_SCORE) + " points")
    print()
    print("CONTROLS:")
    print("  Mouse: Move your paddle (left)")
    print("  1/2/3: Choose difficulty (Easy/Normal/Hard)")
    print("  ESC: Pause")
    print("  R: Resume, N: New game")
    print()
    print("Starting game...")
    print()

    main()
