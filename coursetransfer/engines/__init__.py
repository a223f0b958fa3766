"""
Transfer counting engine.

This package contains the core business logic: matching the student's
courses against each degree program.
"""

from .transfer_count import count_transfers, best_programs

__all__ = [
    "count_transfers",
    "best_programs",
]
