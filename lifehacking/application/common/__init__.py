"""
Application common module.

Contains building blocks shared by all use cases:
- Result: Success/Failure outcome of a use case
- AppError: typed, client-safe failure value
- Pagination: paging parameters and paged results
"""

from .errors import AppError, ErrorKind
from .pagination import PaginatedResult, Pagination
from .result import Failure, Result, Success
from .tasks import run_to_completion

__all__ = [
    "AppError",
    "ErrorKind",
    "Failure",
    "PaginatedResult",
    "Pagination",
    "Result",
    "Success",
    "run_to_completion",
]
