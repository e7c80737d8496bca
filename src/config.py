# Logical canvas size (portrait, matches scene documents' default canvasSize)
WIDTH = 1080
HEIGHT = 1920
# The window shows the canvas scaled down so it fits a desktop screen
WINDOW_SCALE = 0.45
FULLSCREEN = False
FPS = 60
VSYNC = False
MUTE = False
# Cap a single frame's dt so a stall (window drag, breakpoint) doesn't skip
# whole timer states at once
MAX_FRAME_DT = 0.1
# Color the canvas is cleared to before the layers render
CLEAR_COLOR = (15, 23, 42)
# Show FPS / scene / state overlay in the top-left corner
SHOW_DEBUG = False
DEBUG_TEXT_COLOR = (148, 163, 184)
# Scene document loaded by main.py when no --scene is passed (None = boot scene)
DEFAULT_SCENE = None
