"""Pay Roster - employee pay records, ordering and lookup."""

__version__ = "0.1.0"
