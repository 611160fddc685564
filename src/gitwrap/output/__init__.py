"""Reporters — rich terminal output and JSON / YAML reports."""
