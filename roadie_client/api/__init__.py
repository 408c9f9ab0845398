"""Contains the sub-services exposed on the Client"""

from .estimates import EstimateService
from .shipments import ShipmentsService

__all__ = (
    "EstimateService",
    "ShipmentsService",
)
