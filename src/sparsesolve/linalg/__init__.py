from sparsesolve.linalg.matrix import (
    CountingMatrix,
    DenseMatrix,
    FunctionMatrix,
    LinearOperator,
    SparseMatrix,
    mult,
    residual_norm_sq,
)
from sparsesolve.linalg.vector import (
    DenseVector,
    Vector,
    axpy,
    copy,
    dimension,
    dot,
    scal,
    zeros_like,
)

__all__ = [
    "CountingMatrix",
    "DenseMatrix",
    "DenseVector",
    "FunctionMatrix",
    "LinearOperator",
    "SparseMatrix",
    "Vector",
    "axpy",
    "copy",
    "dimension",
    "dot",
    "mult",
    "residual_norm_sq",
    "scal",
    "zeros_like",
]
