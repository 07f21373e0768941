"""
Preset Catalog Core
Configuration and logging
"""
