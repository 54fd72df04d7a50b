"""XML Suite — XSD generation, loot filter creation, and validation."""

__version__ = "2.0.0"
