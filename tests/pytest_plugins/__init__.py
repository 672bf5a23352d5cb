"""Pytest plugins for the sendermeta test suite."""
