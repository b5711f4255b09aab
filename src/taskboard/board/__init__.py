"""
Board subsystem.

Components:
- projection.py: board names derived from tasks + active board resolution
- view_sync.py: per-column visible tasks and the full-refresh synchronizer
"""
