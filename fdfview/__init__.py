"""Wireframe viewer for FDF height maps: map loading, projection, drawing and a pygame window."""

__version__ = "0.1.0"