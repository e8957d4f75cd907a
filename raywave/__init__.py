"""Random numbers, samplers, geometry, rectangle and sphere shapes, and textures for a small ray tracer."""

__version__ = "0.1.0"