"""Editing modes and the transition machine.

Handlers live in their own modules (``mtx.modes.normal_mode`` and friends)
and the dispatcher in ``mtx.modes.mode_manager``.
"""

from .machine import Mode, ModeMachine, max_column

__all__ = ["Mode", "ModeMachine", "max_column"]
