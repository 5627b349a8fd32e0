"""
Orchestration Package
Contains batch pipeline modules for running the codec over whole files
"""

from .batch_pipeline import BatchPipeline

__all__ = [
    'BatchPipeline'
]
