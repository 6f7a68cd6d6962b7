
"""Runtime tunables shared by the game core and the pygame front end"""

CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "DROP_INTERVAL_MS": 1000,
    "SEED": None,
    "FPS": 60,
    "PANEL_W": 180,
    "MARGIN": 16,
}

_POSITIVE = ("COLS", "ROWS", "CELL_SIZE", "DROP_INTERVAL_MS", "FPS", "PANEL_W")


def apply_overrides(**values):
    """Update CONFIG in place; None values are skipped so argparse defaults pass through."""
    for key, val in values.items():
        if key not in CONFIG:
            raise KeyError(f"unknown config key: {key}")
        if val is None:
            continue
        if key in _POSITIVE and val <= 0:
            raise ValueError(f"{key} must be positive, got {val}")
        CONFIG[key] = val
    return CONFIG
