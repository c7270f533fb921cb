"""Data health check results — aggregation and persistence."""
