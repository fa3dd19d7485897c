# correlate/exceptions.py


class CorrelationError(Exception):
    pass


class ParseError(CorrelationError, ValueError):
    pass


class InvalidQuery(ParseError):
    pass


class InvalidClass(ParseError):
    pass


class InvalidConstraint(ParseError):
    pass


class DomainError(CorrelationError):
    pass


class BadQuery(DomainError):
    pass


class BadLink(DomainError):
    pass


class UnknownDomain(DomainError):
    pass


class InvalidGraph(ParseError):
    pass
