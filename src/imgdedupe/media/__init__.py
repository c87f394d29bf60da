"""Image discovery, format recognition and decoding."""
