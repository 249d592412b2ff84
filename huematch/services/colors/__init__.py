"""
huematch Colors Module

Provides pixel sampling, palette extraction, color naming, confidence
assessment and backdrop harmony generation for product photos.
"""

__version__ = "1.0.0"
