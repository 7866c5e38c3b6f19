"""Middleware-layer helpers: QoS policies, name validation, endpoints, options and user data."""

__version__ = "0.1.0"