"""Docroutes - canonical routes for documentation sources."""
