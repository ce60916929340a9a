"""Line checks for .env files and the runner that applies them."""

__all__ = ["base", "basic", "value", "runner"]