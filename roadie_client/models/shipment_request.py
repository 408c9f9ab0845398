from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.delivery_options import DeliveryOptions
    from ..models.item import Item
    from ..models.location import Location
    from ..models.time_window import TimeWindow


T = TypeVar("T", bound="ShipmentRequest")


@_attrs_define
class ShipmentRequest:
    """Body of `POST /shipments` and `PATCH /shipments/{id}`.

    Every field is optional so the same model serves partial updates; the API
    rejects a create that leaves out items, locations, the delivery window or
    options.

    Attributes:
        reference_id (str | Unset): Caller supplied ID for the shipment. Max length 100 characters
        alternate_id_1 (str | Unset): Max length 100 characters
        alternate_id_2 (str | Unset): Max length 100 characters
        description (str | Unset): Summary of the shipment contents. Max length 200 characters
        items (list[Item] | Unset):
        pickup_location (Location | Unset):
        delivery_location (Location | Unset):
        pickup_after (datetime.datetime | Unset):
        deliver_between (TimeWindow | Unset):
        options (DeliveryOptions | Unset):
    """

    reference_id: str | Unset = UNSET
    alternate_id_1: str | Unset = UNSET
    alternate_id_2: str | Unset = UNSET
    description: str | Unset = UNSET
    items: list[Item] | Unset = UNSET
    pickup_location: Location | Unset = UNSET
    delivery_location: Location | Unset = UNSET
    pickup_after: datetime.datetime | Unset = UNSET
    deliver_between: TimeWindow | Unset = UNSET
    options: DeliveryOptions | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        items: list[dict[str, Any]] | Unset = UNSET
        if not isinstance(self.items, Unset):
            items = []
            for items_item_data in self.items:
                items_item = items_item_data.to_dict()
                items.append(items_item)

        pickup_location: dict[str, Any] | Unset = UNSET
        if not isinstance(self.pickup_location, Unset):
            pickup_location = self.pickup_location.to_dict()

        delivery_location: dict[str, Any] | Unset = UNSET
        if not isinstance(self.delivery_location, Unset):
            delivery_location = self.delivery_location.to_dict()

        pickup_after: str | Unset = UNSET
        if not isinstance(self.pickup_after, Unset):
            pickup_after = self.pickup_after.isoformat()

        deliver_between: dict[str, Any] | Unset = UNSET
        if not isinstance(self.deliver_between, Unset):
            deliver_between = self.deliver_between.to_dict()

        options: dict[str, Any] | Unset = UNSET
        if not isinstance(self.options, Unset):
            options = self.options.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if self.reference_id is not UNSET:
            field_dict["reference_id"] = self.reference_id
        if self.alternate_id_1 is not UNSET:
            field_dict["alternate_id_1"] = self.alternate_id_1
        if self.alternate_id_2 is not UNSET:
            field_dict["alternate_id_2"] = self.alternate_id_2
        if self.description is not UNSET:
            field_dict["description"] = self.description
        if items is not UNSET:
            field_dict["items"] = items
        if pickup_location is not UNSET:
            field_dict["pickup_location"] = pickup_location
        if delivery_location is not UNSET:
            field_dict["delivery_location"] = delivery_location
        if pickup_after is not UNSET:
            field_dict["pickup_after"] = pickup_after
        if deliver_between is not UNSET:
            field_dict["deliver_between"] = deliver_between
        if options is not UNSET:
            field_dict["options"] = options

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.delivery_options import DeliveryOptions
        from ..models.item import Item
        from ..models.location import Location
        from ..models.time_window import TimeWindow

        d = dict(src_dict)
        reference_id = d.pop("reference_id", UNSET)

        alternate_id_1 = d.pop("alternate_id_1", UNSET)

        alternate_id_2 = d.pop("alternate_id_2", UNSET)

        description = d.pop("description", UNSET)

        _items = d.pop("items", UNSET)
        items: list[Item] | Unset = UNSET
        if not isinstance(_items, Unset):
            items = []
            for items_item_data in _items:
                items_item = Item.from_dict(items_item_data)

                items.append(items_item)

        _pickup_location = d.pop("pickup_location", UNSET)
        pickup_location: Location | Unset
        if isinstance(_pickup_location, Unset):
            pickup_location = UNSET
        else:
            pickup_location = Location.from_dict(_pickup_location)

        _delivery_location = d.pop("delivery_location", UNSET)
        delivery_location: Location | Unset
        if isinstance(_delivery_location, Unset):
            delivery_location = UNSET
        else:
            delivery_location = Location.from_dict(_delivery_location)

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

        _options = d.pop("options", UNSET)
        options: DeliveryOptions | Unset
        if isinstance(_options, Unset):
            options = UNSET
        else:
            options = DeliveryOptions.from_dict(_options)

        shipment_request = cls(
            reference_id=reference_id,
            alternate_id_1=alternate_id_1,
            alternate_id_2=alternate_id_2,
            description=description,
            items=items,
            pickup_location=pickup_location,
            delivery_location=delivery_location,
            pickup_after=pickup_after,
            deliver_between=deliver_between,
            options=options,
        )

        shipment_request.additional_properties = d
        return shipment_request

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
