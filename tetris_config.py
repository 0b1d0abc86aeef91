
CONFIG = {
    "ROWS": 20,
    "COLS": 10,
    "BASE_INTERVAL": 1000,
    "INTERVAL_STEP": 100,
    "LINES_PER_LEVEL": 10,
    "TIME_UNIT_S": 1e-9,
    "MIN_INTERVAL_MS": 50,
    "CELL_SIZE": 32,
    "FPS": 60,
    "SEED": None,
}

ROWS, COLS = CONFIG["ROWS"], CONFIG["COLS"]
