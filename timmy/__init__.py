"""A top-down survival arcade game on a small entity-component engine."""

__version__ = "0.1.0"