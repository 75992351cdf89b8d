"""
skpmml: PMML encoding for fitted scikit-learn pipelines.

This package provides a small PMML document model, the field and feature
bookkeeping needed while walking a pipeline, and the encoder that splices
collected statistics and precursor models into the final document.
"""

from importlib.metadata import version

__version__ = version("skpmml")

__all__ = ["__version__"]
