#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf and never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_TICK_RATE_HZ: float = 30.0
DEFAULT_RANDOM_SEED = None
DEFAULT_HEADLESS_TICKS: int = 600
DEFAULT_AUTONOMOUS: bool = True

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
TARGET_FPS: int = 60

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "roadsim.log"
WORLD_DEBUG_LOG_FILE: str = "world_debug.log"

# ── Environment variable names ───────────────────────────────────────────────
ENV_TICK_RATE_HZ: str = "ROADSIM_TICK_RATE_HZ"
ENV_SEED: str = "ROADSIM_SEED"
ENV_HEADLESS: str = "ROADSIM_HEADLESS"
ENV_TICKS: str = "ROADSIM_TICKS"
ENV_LOG_LEVEL: str = "ROADSIM_LOG_LEVEL"
