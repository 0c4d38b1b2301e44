"""Module-level constants grouped by subsystem."""
