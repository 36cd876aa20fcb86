"""Core settings for the KPT board backend."""
