"""
sim: simulation core
====================

Modules
-------
world
    :class:`Simulation` owner and the pure :func:`tick` / :func:`step`.
control
    :class:`ControlLoop` autonomous controller and override arbitration.
kinematics
    :class:`Vehicle` state and the per-tick kinematic update.
sensors
    Ray-marching lidar and lateral proximity sensors.
road
    :class:`RoadModel` procedural road polyline.
geometry
    Segment intersection and coordinate helpers.
control_targets
    :class:`ControlTargets` tunable constants.
sim_bridge
    :class:`SimBridge` background-thread scheduler.
"""
