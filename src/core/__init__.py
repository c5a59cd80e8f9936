"""Core result types - chaining and in-place variants."""

from src.core.mutable_result import Cell, MutableResult
from src.core.result import Failure, Result, Success, UnwrapError, chain

__all__ = ["Result", "Success", "Failure", "UnwrapError", "chain", "MutableResult", "Cell"]
