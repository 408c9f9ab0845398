from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="Address")


@_attrs_define
class Address:
    """
    Attributes:
        street1 (str): First line of the address. Max length 200 characters
        city (str): Max length 200 characters
        state (str): Two letter state code
        zip_ (str): Postal code. Max length 10 characters
        name (str | Unset): Name of the location, helpful when it is a business. Max length 200 characters
        store_number (str | Unset): Store identifier for retail locations. Max length 20 characters
        street2 (str | Unset): Second line of the address. Max length 200 characters
        latitude (float | Unset): Exact pickup/delivery latitude
        longitude (float | Unset): Exact pickup/delivery longitude
    """

    street1: str
    city: str
    state: str
    zip_: str
    name: str | Unset = UNSET
    store_number: str | Unset = UNSET
    street2: str | Unset = UNSET
    latitude: float | Unset = UNSET
    longitude: float | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "street1": self.street1,
                "city": self.city,
                "state": self.state,
                "zip": self.zip_,
            }
        )
        if self.name is not UNSET:
            field_dict["name"] = self.name
        if self.store_number is not UNSET:
            field_dict["store_number"] = self.store_number
        if self.street2 is not UNSET:
            field_dict["street2"] = self.street2
        if self.latitude is not UNSET:
            field_dict["latitude"] = self.latitude
        if self.longitude is not UNSET:
            field_dict["longitude"] = self.longitude

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        street1 = d.pop("street1")

        city = d.pop("city")

        state = d.pop("state")

        zip_ = d.pop("zip")

        name = d.pop("name", UNSET)

        store_number = d.pop("store_number", UNSET)

        street2 = d.pop("street2", UNSET)

        latitude = d.pop("latitude", UNSET)

        longitude = d.pop("longitude", UNSET)

        address = cls(
            street1=street1,
            city=city,
            state=state,
            zip_=zip_,
            name=name,
            store_number=store_number,
            street2=street2,
            latitude=latitude,
            longitude=longitude,
        )

        address.additional_properties = d
        return address

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
