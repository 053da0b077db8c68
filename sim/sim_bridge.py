"""
sim/sim_bridge.py
=================
Background-thread scheduler driving :class:`sim.world.Simulation` at a
fixed tick rate.  The UI polls the bridge for the latest snapshot
without blocking, and feeds keyboard state back through
:meth:`SimBridge.set_manual_input`.

Public API consumed by :mod:`ui.pygame_view`
--------------------------------------------
* ``get_state()``             → ``SimulationState``
* ``get_road()``              → ``RoadModel``
* ``get_tick()``              → ``int``
* ``is_autonomous()``         → ``bool``
* ``set_manual_input(input)`` → ``None``
* ``set_autonomous(bool)``    → ``None``
* ``set_paused(bool)``        → ``None``
* ``reset()``                 → ``None``
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from sim.control_targets import ControlTargets
from sim.kinematics import ManualInput
from sim.road import RoadModel
from sim.world import Simulation, SimulationState

log = logging.getLogger("sim_bridge")


class SimBridge:
    """Fixed-rate simulation scheduler running in a background thread.

    The thread calls :meth:`_tick` at ``tick_rate_hz``; each call runs
    one full ``control → kinematics → sensing`` step to completion
    before the next begins.

    Parameters
    ----------
    tick_rate_hz : float
        Simulation ticks per second; must be positive.
    random_seed : int or None
        Road jitter seed for reproducibility.
    params : ControlTargets or None
        Tunable constants.
    autonomous : bool
        Start with the control loop engaged.
    """

    def __init__(
        self,
        tick_rate_hz: float = 30.0,
        random_seed: Optional[int] = None,
        params: Optional[ControlTargets] = None,
        autonomous: bool = True,
    ) -> None:
        if tick_rate_hz <= 0.0:
            raise ValueError(f"tick_rate_hz must be positive, got {tick_rate_hz}")
        self._tick_rate_hz = tick_rate_hz
        self._sim = Simulation(params=params, seed=random_seed, autonomous=autonomous)

        self._lock = threading.Lock()

        # Cached state, written by the sim thread and read by the UI thread
        self._state: SimulationState = self._sim.state
        self._tick_count = 0
        self._manual = ManualInput()

        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._paused = False

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Spawn the background simulation thread."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, daemon=True, name="SimBridge"
        )
        self._thread.start()
        log.info("SimBridge started at %.1f Hz", self._tick_rate_hz)

    def stop(self) -> None:
        """Signal the thread to stop and wait for it to join."""
        self._running = False
        if self._thread:
            self._thread.join(timeout=2.0)
        log.info("SimBridge stopped after %d ticks", self._tick_count)

    # ── Snapshot API ──────────────────────────────────────────────────────────

    def get_state(self) -> SimulationState:
        with self._lock:
            return self._state

    def get_road(self) -> RoadModel:
        return self._sim.road

    def get_tick(self) -> int:
        with self._lock:
            return self._tick_count

    @property
    def params(self) -> ControlTargets:
        return self._sim.params

    def is_autonomous(self) -> bool:
        return self._sim.autonomous

    # ── Input / control API ───────────────────────────────────────────────────

    def set_manual_input(self, manual: ManualInput) -> None:
        """Latest keyboard override; applied on the next tick."""
        with self._lock:
            self._manual = manual

    def set_autonomous(self, autonomous: bool) -> None:
        with self._lock:
            self._sim.autonomous = autonomous
        log.info("Autonomous mode %s", "ON" if autonomous else "OFF")

    def set_paused(self, paused: bool) -> None:
        """Pause / unpause the simulation tick."""
        self._paused = paused

    def reset(self) -> None:
        """Re-initialise the world so the run replays."""
        with self._lock:
            self._sim.reset()
            self._state = self._sim.state
            self._tick_count = 0
            self._manual = ManualInput()
        log.info("SimBridge reset")

    # ── Background loop ───────────────────────────────────────────────────────

    def _loop(self) -> None:
        dt = 1.0 / self._tick_rate_hz
        while self._running:
            t0 = time.perf_counter()
            if not self._paused:
                try:
                    self._tick()
                except Exception:
                    log.exception("SimBridge tick error")
            time.sleep(max(0.0, dt - (time.perf_counter() - t0)))

    def _tick(self) -> None:
        with self._lock:
            manual = self._manual
            state = self._sim.advance(manual=manual)
            self._state = state
            self._tick_count = self._sim.tick_count
