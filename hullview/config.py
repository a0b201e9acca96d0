"""
Configuration & Constants
=========================
Central registry for the viewer's look and the builders' fixed parameters.
There are no runtime settings: no flags, no environment variables.

Exports:
    WINDOW_TITLE (str): Title of the matplotlib window.
    WINDOW_SIZE (tuple): Initial drawing area size in pixels (width, height).
    JARVIS_SEED_OFFSET (float): Distance of the virtual point that fixes the
        initial edge direction of Jarvis' March.
"""

WINDOW_TITLE: str = "Convex Hull"
WINDOW_SIZE: tuple = (800, 800)
FIGURE_DPI: int = 100

JARVIS_SEED_OFFSET: float = 0.0001

# Colours follow the classic black-canvas rendering
BACKGROUND_COLOR: str = "black"
AXIS_COLOR: tuple = (0.5, 0.5, 0.5)
POINT_COLOR: tuple = (1.0, 0.0, 0.0)
HULL_COLOR: tuple = (1.0, 1.0, 0.0)
STATUS_COLOR: str = "white"

POINT_SIZE: float = 4.0
HULL_LINE_WIDTH: float = 1.5

CLEAR_KEY: str = "c"
