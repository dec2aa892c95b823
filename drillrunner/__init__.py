"""Worked exercise drills, an editor project-file generator and status-line helpers."""

__version__ = "5.2.1"