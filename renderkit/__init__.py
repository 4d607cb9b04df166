"""3D math, collision shapes, scene management, serial input and renderer bookkeeping."""

__version__ = "0.1.0"