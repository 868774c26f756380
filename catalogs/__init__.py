"""
Catalogs module - star table ingestion.
"""
