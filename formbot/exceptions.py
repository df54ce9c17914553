class FormbotError(Exception):
    """Base class for errors raised by the service layer."""


class ConflictError(FormbotError):
    """A uniqueness rule would be broken by the write."""


class NotFoundError(FormbotError):
    """The referenced row does not exist."""


class InvalidInputError(FormbotError):
    """A required value is missing or empty."""
