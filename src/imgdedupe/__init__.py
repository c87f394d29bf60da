"""imgdedupe - find near-duplicate images and group them under predictable names."""

__version__ = "0.1.0"
