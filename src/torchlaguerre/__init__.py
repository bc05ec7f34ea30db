"""torchlaguerre: Laguerre polynomial root polishing on PyTorch complex tensors."""

from . import (
    polynomial,
    root_finding,
)

__all__ = [
    "polynomial",
    "root_finding",
]

__version__ = "0.1.0"
