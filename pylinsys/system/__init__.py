"""
Operations treating a matrix as a system of linear equations.

Public API:
    substitute(matrix, values)  - evaluate every equation at the given values
"""

from pylinsys.system.substitution import substitute

__all__ = [
    "substitute",
]
