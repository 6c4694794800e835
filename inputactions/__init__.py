"""Input-method-agnostic game actions: button states, axes, dead zones and per-action timing."""

__version__ = "0.1.0"

__all__ = [
    "action_state",
    "actionlike",
    "axislike",
    "buttonlike",
    "driver",
    "dual_axis_data",
    "virtual_inputs",
]