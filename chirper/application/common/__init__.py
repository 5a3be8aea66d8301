from .exceptions import DuplicateRecordError
from .pagination import PageRequest
from .unit_of_work import UnitOfWork

__all__ = [
    "DuplicateRecordError",
    "PageRequest",
    "UnitOfWork",
]
