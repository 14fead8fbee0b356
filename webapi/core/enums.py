"""Core enumerations shared by the capability registry and the driver.

Key Types:
    - PaginationKind: Which pagination strategy an operation supports
    - TimelineDirection: Which way a timeline session walks through time
"""

from enum import Enum


class PaginationKind(str, Enum):
    """Pagination strategies an operation can be driven with.

    String enum so the value can be logged and compared against plain strings.
    """

    CURSOR = "cursor"
    TIMELINE = "timeline"
    TRADITIONAL = "traditional"
    NONE = "none"

    @property
    def paginated(self) -> bool:
        """Whether auto-pagination is offered for this kind."""
        return self is not PaginationKind.NONE


class TimelineDirection(str, Enum):
    """Direction a timeline session walks.

    BACKWARD starts at the newest items and lowers `latest` after each page;
    FORWARD starts at the oldest and raises `oldest`.
    """

    BACKWARD = "backward"
    FORWARD = "forward"
