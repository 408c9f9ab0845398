from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional, Union
from urllib.parse import quote

from ..models.cancel_shipment_request import CancelShipmentRequest
from ..models.shipment import Shipment
from ..models.shipment_request import ShipmentRequest
from .service import Service

ShipmentId = Union[int, str]


def _shipment_path(shipment_id: ShipmentId) -> str:
    return "shipments/{shipment_id}".format(
        shipment_id=quote(str(shipment_id), safe=""),
    )


def _list_params(
    ids: Optional[Iterable[ShipmentId]], reference_ids: Optional[Iterable[str]]
) -> dict[str, str]:
    params: dict[str, str] = {}
    if ids:
        params["ids"] = ",".join(str(i) for i in ids)
    if reference_ids:
        params["reference_ids"] = ",".join(reference_ids)
    return params


def _parse_shipment_list(data: Any) -> list[Shipment]:
    return [Shipment.from_dict(item) for item in data]


class ShipmentsService(Service):
    """
    Shipment lifecycle operations.

    Each operation comes in a sync and an `_async` flavour; both raise
    errors.APIError on a non-2xx status and let httpx errors propagate.
    """

    def create(self, shipment: ShipmentRequest, *, timeout: Optional[float] = None) -> Shipment:
        """Create a shipment from a full ShipmentRequest."""
        request = self.client.create_request("POST", "shipments", body=shipment, timeout=timeout)
        return self.client.do(request, Shipment.from_dict)

    async def create_async(self, shipment: ShipmentRequest, *, timeout: Optional[float] = None) -> Shipment:
        request = self.client.create_request("POST", "shipments", body=shipment, timeout=timeout)
        return await self.client.do_async(request, Shipment.from_dict)

    def get(self, shipment_id: ShipmentId, *, timeout: Optional[float] = None) -> Shipment:
        """Retrieve a single shipment by its Roadie ID."""
        request = self.client.create_request("GET", _shipment_path(shipment_id), timeout=timeout)
        return self.client.do(request, Shipment.from_dict)

    async def get_async(self, shipment_id: ShipmentId, *, timeout: Optional[float] = None) -> Shipment:
        request = self.client.create_request("GET", _shipment_path(shipment_id), timeout=timeout)
        return await self.client.do_async(request, Shipment.from_dict)

    def list(
        self,
        ids: Optional[Iterable[ShipmentId]] = None,
        reference_ids: Optional[Iterable[str]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> list[Shipment]:
        """
        Retrieve several shipments at once.

        Args:
            ids: Roadie shipment IDs
            reference_ids: Caller supplied reference IDs

        Returns:
            Shipments matching either filter
        """
        request = self.client.create_request(
            "GET", "shipments", params=_list_params(ids, reference_ids), timeout=timeout
        )
        return self.client.do(request, _parse_shipment_list) or []

    async def list_async(
        self,
        ids: Optional[Iterable[ShipmentId]] = None,
        reference_ids: Optional[Iterable[str]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> list[Shipment]:
        request = self.client.create_request(
            "GET", "shipments", params=_list_params(ids, reference_ids), timeout=timeout
        )
        return await self.client.do_async(request, _parse_shipment_list) or []

    def update(
        self, shipment_id: ShipmentId, changes: ShipmentRequest, *, timeout: Optional[float] = None
    ) -> Shipment:
        """Update a shipment. Only the fields set on `changes` are sent."""
        request = self.client.create_request("PATCH", _shipment_path(shipment_id), body=changes, timeout=timeout)
        return self.client.do(request, Shipment.from_dict)

    async def update_async(
        self, shipment_id: ShipmentId, changes: ShipmentRequest, *, timeout: Optional[float] = None
    ) -> Shipment:
        request = self.client.create_request("PATCH", _shipment_path(shipment_id), body=changes, timeout=timeout)
        return await self.client.do_async(request, Shipment.from_dict)

    def cancel(
        self, shipment_id: ShipmentId, cancellation: CancelShipmentRequest, *, timeout: Optional[float] = None
    ) -> None:
        """Cancel a shipment. The API answers with an empty body."""
        request = self.client.create_request(
            "DELETE", _shipment_path(shipment_id), body=cancellation, timeout=timeout
        )
        self.client.do(request)

    async def cancel_async(
        self, shipment_id: ShipmentId, cancellation: CancelShipmentRequest, *, timeout: Optional[float] = None
    ) -> None:
        request = self.client.create_request(
            "DELETE", _shipment_path(shipment_id), body=cancellation, timeout=timeout
        )
        await self.client.do_async(request)
