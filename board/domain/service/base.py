"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span entities: comment threads,
    the vote ledger and cache coherence.
    """

    pass
