from enum import Enum

class EdgeType(str, Enum):
    """Edge type (DIRECTED, UNDIRECTED).

    Attributes:
        DIRECTED: Ordered endpoint pair, equality is order-sensitive
        UNDIRECTED: Unordered endpoint pair, equality holds under either ordering
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @property
    def is_directed(self) -> bool:
        return self is EdgeType.DIRECTED
