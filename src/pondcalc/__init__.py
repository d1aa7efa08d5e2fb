"""Pond excavation and hauling timeline estimator."""

__version__ = "0.1.0"
