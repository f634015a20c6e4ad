"""Worked solutions to small programming drills, with terminal status-line helpers."""

__version__ = "4.4.0"