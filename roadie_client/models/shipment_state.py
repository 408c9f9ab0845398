from enum import Enum


class ShipmentState(str, Enum):
    ASSIGNED = "assigned"
    AT_DELIVERY = "at_delivery"
    AT_PICKUP = "at_pickup"
    CANCELED = "canceled"
    DELIVERY_ATTEMPTED = "delivery_attempted"
    DELIVERY_CONFIRMED = "delivery_confirmed"
    EN_ROUTE = "en_route"
    PICKUP_CONFIRMED = "pickup_confirmed"
    RETURNED = "returned"
    SCHEDULED = "scheduled"

    def __str__(self) -> str:
        return str(self.value)
