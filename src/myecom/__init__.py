"""MyEcom: e-commerce backend built around the order placement pipeline."""

__version__ = "0.1.0"
