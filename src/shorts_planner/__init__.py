"""Shorts Planner — turns a content brief into a short-video production plan."""

__version__ = "1.0.0"
