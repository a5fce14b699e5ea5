
CONFIG = {
    "COLS": 10,
    "ROWS": 16,
    "CELL_SIZE": 25,
    "STANDARD_FPS": 4,
    "FAST_FPS": 20,
    "FRAME_RATE": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
    "CAPTION": "Tetris (canvas)",
}
