"""
Application common module.

- UnitOfWork: transaction boundary and domain event dispatch
"""

from .unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
