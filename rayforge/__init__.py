"""Points, rays, bounds, matrices, colors, pixel buffers and small containers for ray casting."""

__version__ = "0.1.0"