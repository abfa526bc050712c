"""
對齊模組
"""

from .aligner import AlignmentConfig, WordAligner, align

__all__ = [
    "AlignmentConfig",
    "WordAligner",
    "align",
]
