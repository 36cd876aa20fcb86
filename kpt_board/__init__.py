"""KPT retrospective board backend."""

__version__ = "0.1.0"
