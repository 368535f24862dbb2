"""Database layer for saved resume snapshots."""
