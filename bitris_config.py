
CONFIG = {
    "CELL_SIZE": 28,
    "FIELD_WIDTH": 10,
    "FIELD_HEIGHT": 20,
    "SEED": None,
    "DEBUG": False,
    "LOG_LEVEL": "INFO",
    "GAME_OVER_HOLD_MS": 2000,
}
