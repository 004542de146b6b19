"""Exceptions raised by pitchmap."""


class InvalidArgumentError(ValueError):
    """An argument lies outside its valid domain.

    Out-of-range results (a pitch that does not exist in the covered
    table span) are not errors: those operations return ``None``.
    """
