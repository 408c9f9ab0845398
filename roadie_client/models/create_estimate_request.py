from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.item import Item
    from ..models.location import Location
    from ..models.time_window import TimeWindow


T = TypeVar("T", bound="CreateEstimateRequest")


@_attrs_define
class CreateEstimateRequest:
    """Body of `POST /estimates`.

    Attributes:
        items (list[Item]): One or more items
        pickup_location (Location):
        delivery_location (Location):
        pickup_after (datetime.datetime | Unset): When the shipment is ready for pickup
        deliver_between (TimeWindow | Unset): Window within which the delivery must be complete
    """

    items: list[Item]
    pickup_location: Location
    delivery_location: Location
    pickup_after: datetime.datetime | Unset = UNSET
    deliver_between: TimeWindow | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        items = []
        for items_item_data in self.items:
            items_item = items_item_data.to_dict()
            items.append(items_item)

        pickup_location = self.pickup_location.to_dict()

        delivery_location = self.delivery_location.to_dict()

        pickup_after: str | Unset = UNSET
        if not isinstance(self.pickup_after, Unset):
            pickup_after = self.pickup_after.isoformat()

        deliver_between: dict[str, Any] | Unset = UNSET
        if not isinstance(self.deliver_between, Unset):
            deliver_between = self.deliver_between.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "items": items,
                "pickup_location": pickup_location,
                "delivery_location": delivery_location,
            }
        )
        if pickup_after is not UNSET:
            field_dict["pickup_after"] = pickup_after
        if deliver_between is not UNSET:
            field_dict["deliver_between"] = deliver_between

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.item import Item
        from ..models.location import Location
        from ..models.time_window import TimeWindow

        d = dict(src_dict)
        items = []
        _items = d.pop("items")
        for items_item_data in _items:
            items_item = Item.from_dict(items_item_data)

            items.append(items_item)

        pickup_location = Location.from_dict(d.pop("pickup_location"))

        delivery_location = Location.from_dict(d.pop("delivery_location"))

        _pickup_after = d.pop("pickup_after", UNSET)
        pickup_after: datetime.datetime | Unset
        if isinstance(_pickup_after, Unset):
            pickup_after = UNSET
        else:
            pickup_after = isoparse(_pickup_after)

        _deliver_between = d.pop("deliver_between", UNSET)
        deliver_between: TimeWindow | Unset
        if isinstance(_deliver_between, Unset):
            deliver_between = UNSET
        else:
            deliver_between = TimeWindow.from_dict(_deliver_between)

        create_estimate_request = cls(
            items=items,
            pickup_location=pickup_location,
            delivery_location=delivery_location,
            pickup_after=pickup_after,
            deliver_between=deliver_between,
        )

        create_estimate_request.additional_properties = d
        return create_estimate_request

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
