"""Flow — wizard stages, gates, snapshot reducer, session."""

from solar_switch.flow.stages import Stage, advance, can_advance, retreat
from solar_switch.flow.reducer import apply_update, restart
from solar_switch.flow.session import CalculatorSession, SessionView

__all__ = [
    "Stage",
    "advance",
    "can_advance",
    "retreat",
    "apply_update",
    "restart",
    "CalculatorSession",
    "SessionView",
]
