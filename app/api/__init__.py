"""Presentation layer: controllers, dependencies, and routes."""
