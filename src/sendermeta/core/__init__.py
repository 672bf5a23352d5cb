"""Core module - pure derivation logic, models and collaborator interfaces."""
