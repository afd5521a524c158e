"""Engine-independent gameplay pieces for a top-down twin-stick shooter."""

__version__ = "0.1.0"