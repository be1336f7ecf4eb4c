"""
Dense matrix module.

Public API:
    Matrix        - fixed-shape float32 matrix with value-semantics operators
    print_matrix  - write a matrix's tabular form to stdout
"""

from densematrix.matrix.matrix import Matrix
from densematrix.matrix._format import print_matrix

__all__ = [
    "Matrix",
    "print_matrix",
]
