"""markscrub - seek and destroy spurious " (1)" markers left by sync clients."""

__version__ = "0.1.0"
