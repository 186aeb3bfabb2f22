"""Custom exceptions for the rdfwalks walk generation engine."""


class RdfWalksError(Exception):
    """Base exception for all rdfwalks errors."""


class StoreUnavailableError(RdfWalksError, OSError):
    """Raised when the underlying triple store cannot be opened.

    Fatal for the engine instance that wanted the store. The original
    cause (missing file, parser failure) is chained as ``__cause__``.
    """


class StoreIterationError(RdfWalksError):
    """Raised by a store when iterating a triple pattern fails midway.

    Walk strategies treat this as soft: the current hop is abandoned
    and the walk continues with its next iteration.
    """


class IdSpaceError(RdfWalksError, ValueError):
    """Raised when dictionary counts violate the identifier partition.

    For example a shared section larger than the subject section, or a
    negative count.
    """
