"""Custom exceptions for retirecast."""

from __future__ import annotations


class RetirecastError(Exception):
    """Base exception for retirecast."""


class ConfigError(RetirecastError):
    """Invalid configuration."""


class SimulationError(RetirecastError):
    """Error during simulation."""


class SimulationCancelled(SimulationError):
    """A Monte Carlo run was stopped between batches at the caller's request."""
