"""Contains all the data models used in inputs/outputs"""

from .address import Address
from .cancel_shipment_request import CancelShipmentRequest
from .contact import Contact
from .create_estimate_request import CreateEstimateRequest
from .create_estimate_response import CreateEstimateResponse
from .delivery_options import DeliveryOptions
from .driver import Driver
from .error_detail import ErrorDetail
from .error_response import ErrorResponse
from .item import Item
from .location import Location
from .shipment import Shipment
from .shipment_event import ShipmentEvent
from .shipment_request import ShipmentRequest
from .shipment_state import ShipmentState
from .time_window import TimeWindow

__all__ = (
    "Address",
    "CancelShipmentRequest",
    "Contact",
    "CreateEstimateRequest",
    "CreateEstimateResponse",
    "DeliveryOptions",
    "Driver",
    "ErrorDetail",
    "ErrorResponse",
    "Item",
    "Location",
    "Shipment",
    "ShipmentEvent",
    "ShipmentRequest",
    "ShipmentState",
    "TimeWindow",
)
