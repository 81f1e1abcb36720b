"""Analytic reports over the e-commerce sales warehouse."""

__version__ = "0.1.0"
