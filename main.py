#!/usr/bin/env python3
"""
main.py
=======
Entry point.  Runs the road simulation either headless (a fixed number
of ticks, logged) or behind the Pygame view.

Environment overrides
---------------------
``ROADSIM_TICK_RATE_HZ``  scheduler rate for the windowed run
``ROADSIM_SEED``          road jitter seed
``ROADSIM_HEADLESS``      ``1`` to skip the window
``ROADSIM_TICKS``         tick count for the headless run
``ROADSIM_LOG_LEVEL``     ``DEBUG``, ``INFO``, …
"""

import logging
import os
from typing import Optional

import config
from logging_setup import setup_logging
from sim.world import Simulation


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger("main").warning("Ignoring %s=%r (not a number)", name, raw)
        return default


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger("main").warning("Ignoring %s=%r (not an integer)", name, raw)
        return default


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def run_headless(ticks: int, seed: Optional[int]) -> Simulation:
    """Advance the simulation *ticks* times without a display."""
    log = logging.getLogger("main")
    sim = Simulation(seed=seed, autonomous=config.DEFAULT_AUTONOMOUS)
    for _ in range(ticks):
        state = sim.advance()
        if sim.tick_count % 100 == 0:
            v = state.vehicle
            log.info(
                "tick %d: pos=(%.1f, %.1f) v=%.2f steer=%.1f lidar_hits=%d",
                sim.tick_count, v.x, v.y, v.speed, v.steering_angle,
                state.lidar.hit_count,
            )
    log.info("Headless run finished: %d ticks, %.1f units travelled",
             sim.tick_count, sim.odometer)
    return sim


def main() -> None:
    level_name = os.environ.get(config.ENV_LOG_LEVEL, "INFO").upper()
    setup_logging(getattr(logging, level_name, logging.INFO),
                  world_debug=level_name == "DEBUG")
    log = logging.getLogger("main")

    seed = _env_int(config.ENV_SEED, config.DEFAULT_RANDOM_SEED)

    if _env_flag(config.ENV_HEADLESS, False):
        ticks = _env_int(config.ENV_TICKS, config.DEFAULT_HEADLESS_TICKS)
        log.info("Starting headless run (%d ticks, seed=%s)", ticks, seed)
        run_headless(ticks, seed)
        return

    from sim.sim_bridge import SimBridge
    from ui import run_pygame_view

    tick_rate = _env_float(config.ENV_TICK_RATE_HZ, config.DEFAULT_TICK_RATE_HZ)
    if tick_rate <= 0.0:
        log.warning("Ignoring non-positive tick rate %.3f Hz", tick_rate)
        tick_rate = config.DEFAULT_TICK_RATE_HZ
    bridge = SimBridge(
        tick_rate_hz=tick_rate,
        random_seed=seed,
        autonomous=config.DEFAULT_AUTONOMOUS,
    )
    log.info("Starting road view (seed=%s)", seed)
    bridge.start()
    try:
        run_pygame_view(
            bridge,
            width=config.WINDOW_WIDTH,
            height=config.WINDOW_HEIGHT,
            fps=config.TARGET_FPS,
        )
    except KeyboardInterrupt:
        log.info("Shutting down...")
    finally:
        bridge.stop()


if __name__ == "__main__":
    main()
