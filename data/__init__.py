"""
Data Package
Contains loaders for the files the batch pipeline reads and writes
"""

from .text_loader import TextLoader

__all__ = [
    'TextLoader'
]
