"""
Preset Catalog HTTP API
"""
