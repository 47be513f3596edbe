"""CLI package for the bookshelf service"""
from .main import cli

__all__ = ['cli']
