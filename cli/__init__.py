"""Interactive console front-end for GaussSolver."""

from cli.app import LinearSystemCLI

__all__ = ["LinearSystemCLI"]
