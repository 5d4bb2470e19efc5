"""Record registry for a car competition: cars, owners and prizes."""

__version__ = "1.0.0"
