"""Collection service models.

Defines the service types a notification can be about and the per-call
event payload handed to the gateway.

Created: 2026-10-19
Version: 1.0.0
"""

from enum import Enum

from pydantic import BaseModel, Field


class ServiceType(str, Enum):
    """Waste-collection service type enumeration.

    Attributes:
        REFUSE: General refuse collection.
        RECYCLING: Recycling collection.
    """

    REFUSE = "refuse"
    RECYCLING = "recycling"

    @property
    def display_name(self) -> str:
        """Capitalised word used in rendered text (``Refuse``, ``Recycling``)."""
        return self.name.lower().capitalize()


class ServiceEvent(BaseModel):
    """Notification payload describing an upcoming collection.

    Supplied by the caller on every ``notify`` call and never retained by
    the gateway.

    Attributes:
        service_type: Which collection the notification is about.
    """

    service_type: ServiceType = Field(..., description="Collection service type")

    model_config = {"frozen": True}
