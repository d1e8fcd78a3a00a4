"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services own the lifecycle rules of posts, comments and ratings:
    identifier assignment, existence checks, authorization and the node
    cascade. Repositories stay plain collections.
    """

    pass
