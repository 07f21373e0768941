"""
Preset Catalog API Routes
"""
