"""Helpers for deploying, describing and invoking serverless functions and handling their templates."""

__version__ = "0.1.0"