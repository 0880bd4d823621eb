"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """No usable contribution period remains after filtering"""

    pass


class PeriodNotFoundError(DomainException):
    """A session operation referenced an unknown period id"""

    pass


class ReferenceDataError(DomainException):
    """Reference table data is malformed or cannot be loaded"""

    pass
