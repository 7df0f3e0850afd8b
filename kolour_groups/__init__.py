"""
kolour_groups package.

Hosts the application-wide helpers (logging) used by the ``core`` runtime.
The host-facing entry point is ``core.app.KolourGroupsExtension``.
"""

__all__ = [
    "logger",
]
