"""
Known-answer arithmetic vectors.

JSON vector files validated by JSON Schema and checked against the limb arithmetic.
"""

from .loader import (
    DEFAULT_VECTORS_PATH,
    SCHEMA_PATH,
    ArithmeticVector,
    VectorFileError,
    failed_vectors,
    load_vectors,
    verify_vector,
)

__all__ = [
    # Constants
    "DEFAULT_VECTORS_PATH",
    "SCHEMA_PATH",
    # Exceptions
    "VectorFileError",
    # Model
    "ArithmeticVector",
    # Functions
    "failed_vectors",
    "load_vectors",
    "verify_vector",
]
