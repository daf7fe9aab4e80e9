"""Trapezoidal motion profiles, wrench frame transforms and checked YAML configuration parsing."""

__version__ = "0.1.0"
__all__ = ["transforms", "yaml_parser", "trap"]