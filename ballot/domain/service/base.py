"""Domain service base class."""


class Service:
    """Marker base for domain services.

    A service owns the rules that don't fit on a single entity, such as
    uniqueness across votes or which collection a target id lives in.
    """
