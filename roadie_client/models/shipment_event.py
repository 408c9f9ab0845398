from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.location import Location


T = TypeVar("T", bound="ShipmentEvent")


@_attrs_define
class ShipmentEvent:
    """A step in a shipment's lifecycle. Returned by the API, never sent.

    Attributes:
        name (str | Unset): Event type, e.g. `driver_assigned`
        occurred_at (datetime.datetime | Unset):
        location (Location | Unset): Where the event happened
    """

    name: str | Unset = UNSET
    occurred_at: datetime.datetime | Unset = UNSET
    location: Location | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        occurred_at: str | Unset = UNSET
        if not isinstance(self.occurred_at, Unset):
            occurred_at = self.occurred_at.isoformat()

        location: dict[str, Any] | Unset = UNSET
        if not isinstance(self.location, Unset):
            location = self.location.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if self.name is not UNSET:
            field_dict["name"] = self.name
        if occurred_at is not UNSET:
            field_dict["occurred_at"] = occurred_at
        if location is not UNSET:
            field_dict["location"] = location

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.location import Location

        d = dict(src_dict)
        name = d.pop("name", UNSET)

        _occurred_at = d.pop("occurred_at", UNSET)
        occurred_at: datetime.datetime | Unset
        if isinstance(_occurred_at, Unset) or _occurred_at is None:
            occurred_at = UNSET
        else:
            occurred_at = isoparse(_occurred_at)

        _location = d.pop("location", UNSET)
        location: Location | Unset
        if isinstance(_location, Unset) or _location is None:
            location = UNSET
        else:
            location = Location.from_dict(_location)

        shipment_event = cls(
            name=name,
            occurred_at=occurred_at,
            location=location,
        )

        shipment_event.additional_properties = d
        return shipment_event

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
