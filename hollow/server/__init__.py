"""Hollow FastAPI Server"""
from .app import app, get_cache, run

__all__ = ['app', 'get_cache', 'run']
