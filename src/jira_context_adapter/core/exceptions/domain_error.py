class DomainError(Exception):
    """
    Base class for all adapter exceptions.
    Lets callers catch every failure raised by this package with a single clause.
    """

    pass
