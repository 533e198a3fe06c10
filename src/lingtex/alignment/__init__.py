"""
Alignment Package

Orders an example's tiers and caps the number of aligned gb4e lines.
"""

from .aligner import (
    AlignedLines,
    order_tiers,
    gather_aligned_lines,
    aligned_line_count,
    select_aligned_lines,
    CANONICAL_TIER_ORDER,
    DEFAULT_MAX_ALIGNED_LINES,
    MIN_ALIGNED_LINES,
)

__all__ = [
    'AlignedLines',
    'order_tiers',
    'gather_aligned_lines',
    'aligned_line_count',
    'select_aligned_lines',
    'CANONICAL_TIER_ORDER',
    'DEFAULT_MAX_ALIGNED_LINES',
    'MIN_ALIGNED_LINES',
]
