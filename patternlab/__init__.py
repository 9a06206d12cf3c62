"""Worked examples of the factory method and singleton design patterns: logistics fleets and a shared configuration."""

__version__ = "0.1.0"