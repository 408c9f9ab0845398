from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..models.shipment_state import ShipmentState
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.delivery_options import DeliveryOptions
    from ..models.driver import Driver
    from ..models.item import Item
    from ..models.location import Location
    from ..models.shipment_event import ShipmentEvent
    from ..models.time_window import TimeWindow


T = TypeVar("T", bound="Shipment")


def _parse_datetime(data: object) -> datetime.datetime | Unset:
    if data is None or isinstance(data, Unset):
        return UNSET
    if not isinstance(data, str):
        raise TypeError(f"expected an RFC 3339 string, got {type(data).__name__}")
    return isoparse(data)


def _format_datetime(value: datetime.datetime | Unset) -> str | Unset:
    if isinstance(value, Unset):
        return UNSET
    return value.isoformat()


@_attrs_define
class Shipment:
    """A delivery tracked through its lifecycle.

    Attributes:
        id (int): Roadie shipment ID
        reference_id (str | Unset):
        alternate_id_1 (str | Unset):
        alternate_id_2 (str | Unset):
        description (str | Unset):
        state (ShipmentState | Unset):
        items (list[Item] | Unset):
        pickup_location (Location | Unset):
        delivery_location (Location | Unset):
        pickup_after (datetime.datetime | Unset):
        deliver_between (TimeWindow | Unset):
        options (DeliveryOptions | Unset):
        tracking_number (str | Unset):
        driver (Driver | Unset): Present once a driver is assigned
        events (list[ShipmentEvent] | Unset):
        price (float | Unset):
        estimated_distance (float | Unset):
        created_at (datetime.datetime | Unset):
        updated_at (datetime.datetime | Unset):
    """

    id: int
    reference_id: str | Unset = UNSET
    alternate_id_1: str | Unset = UNSET
    alternate_id_2: str | Unset = UNSET
    description: str | Unset = UNSET
    state: ShipmentState | Unset = UNSET
    items: list[Item] | Unset = UNSET
    pickup_location: Location | Unset = UNSET
    delivery_location: Location | Unset = UNSET
    pickup_after: datetime.datetime | Unset = UNSET
    deliver_between: TimeWindow | Unset = UNSET
    options: DeliveryOptions | Unset = UNSET
    tracking_number: str | Unset = UNSET
    driver: Driver | Unset = UNSET
    events: list[ShipmentEvent] | Unset = UNSET
    price: float | Unset = UNSET
    estimated_distance: float | Unset = UNSET
    created_at: datetime.datetime | Unset = UNSET
    updated_at: datetime.datetime | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        state: str | Unset = UNSET
        if not isinstance(self.state, Unset):
            state = self.state.value

        items: list[dict[str, Any]] | Unset = UNSET
        if not isinstance(self.items, Unset):
            items = [items_item_data.to_dict() for items_item_data in self.items]

        events: list[dict[str, Any]] | Unset = UNSET
        if not isinstance(self.events, Unset):
            events = [events_item_data.to_dict() for events_item_data in self.events]

        nested: dict[str, Any] = {}
        for key in ("pickup_location", "delivery_location", "deliver_between", "options", "driver"):
            value = getattr(self, key)
            if not isinstance(value, Unset):
                nested[key] = value.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "id": self.id,
            }
        )
        for key in ("reference_id", "alternate_id_1", "alternate_id_2", "description", "tracking_number"):
            value = getattr(self, key)
            if value is not UNSET:
                field_dict[key] = value
        if state is not UNSET:
            field_dict["state"] = state
        if items is not UNSET:
            field_dict["items"] = items
        field_dict.update(nested)
        if events is not UNSET:
            field_dict["events"] = events
        if self.price is not UNSET:
            field_dict["price"] = self.price
        if self.estimated_distance is not UNSET:
            field_dict["estimated_distance"] = self.estimated_distance
        for key in ("pickup_after", "created_at", "updated_at"):
            formatted = _format_datetime(getattr(self, key))
            if formatted is not UNSET:
                field_dict[key] = formatted

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.delivery_options import DeliveryOptions
        from ..models.driver import Driver
        from ..models.item import Item
        from ..models.location import Location
        from ..models.shipment_event import ShipmentEvent
        from ..models.time_window import TimeWindow

        d = dict(src_dict)
        id = d.pop("id")

        reference_id = d.pop("reference_id", UNSET)

        alternate_id_1 = d.pop("alternate_id_1", UNSET)

        alternate_id_2 = d.pop("alternate_id_2", UNSET)

        description = d.pop("description", UNSET)

        _state = d.pop("state", UNSET)
        state: ShipmentState | Unset
        if isinstance(_state, Unset) or _state is None:
            state = UNSET
        else:
            state = ShipmentState(_state)

        _items = d.pop("items", UNSET)
        items: list[Item] | Unset = UNSET
        if not isinstance(_items, Unset) and _items is not None:
            items = [Item.from_dict(items_item_data) for items_item_data in _items]

        def _parse_nested(key: str, model: Any) -> Any:
            data = d.pop(key, UNSET)
            if isinstance(data, Unset) or data is None:
                return UNSET
            return model.from_dict(data)

        pickup_location = _parse_nested("pickup_location", Location)
        delivery_location = _parse_nested("delivery_location", Location)
        deliver_between = _parse_nested("deliver_between", TimeWindow)
        options = _parse_nested("options", DeliveryOptions)
        driver = _parse_nested("driver", Driver)

        tracking_number = d.pop("tracking_number", UNSET)

        _events = d.pop("events", UNSET)
        events: list[ShipmentEvent] | Unset = UNSET
        if not isinstance(_events, Unset) and _events is not None:
            events = [ShipmentEvent.from_dict(events_item_data) for events_item_data in _events]

        price = d.pop("price", UNSET)

        estimated_distance = d.pop("estimated_distance", UNSET)

        pickup_after = _parse_datetime(d.pop("pickup_after", UNSET))

        created_at = _parse_datetime(d.pop("created_at", UNSET))

        updated_at = _parse_datetime(d.pop("updated_at", UNSET))

        shipment = cls(
            id=id,
            reference_id=reference_id,
            alternate_id_1=alternate_id_1,
            alternate_id_2=alternate_id_2,
            description=description,
            state=state,
            items=items,
            pickup_location=pickup_location,
            delivery_location=delivery_location,
            pickup_after=pickup_after,
            deliver_between=deliver_between,
            options=options,
            tracking_number=tracking_number,
            driver=driver,
            events=events,
            price=price,
            estimated_distance=estimated_distance,
            created_at=created_at,
            updated_at=updated_at,
        )

        shipment.additional_properties = d
        return shipment

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
