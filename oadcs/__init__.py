"""Orbit and attitude dynamics: unit conversions, attitude representations, Runge-Kutta integrators and gravity models."""

__version__ = "0.1.0"

__all__ = ["attitude", "bodies", "gravity", "integrators", "main", "representations", "units"]