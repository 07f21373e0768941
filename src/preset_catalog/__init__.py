"""
Audio Sampler Web - Preset Catalog
Presets and their sounds over an HTTP API
"""

__version__ = "1.0.0"
