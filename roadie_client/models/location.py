from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.address import Address
    from ..models.contact import Contact


T = TypeVar("T", bound="Location")


@_attrs_define
class Location:
    """A pickup or delivery point.

    Attributes:
        address (Address):
        contact (Contact | Unset): Required when creating a shipment
        notes (str | Unset): Anything the driver needs to know about the location. Max length 500 characters
    """

    address: Address
    contact: Contact | Unset = UNSET
    notes: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        address = self.address.to_dict()

        contact: dict[str, Any] | Unset = UNSET
        if not isinstance(self.contact, Unset):
            contact = self.contact.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "address": address,
            }
        )
        if contact is not UNSET:
            field_dict["contact"] = contact
        if self.notes is not UNSET:
            field_dict["notes"] = self.notes

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.address import Address
        from ..models.contact import Contact

        d = dict(src_dict)
        address = Address.from_dict(d.pop("address"))

        _contact = d.pop("contact", UNSET)
        contact: Contact | Unset
        if isinstance(_contact, Unset) or _contact is None:
            contact = UNSET
        else:
            contact = Contact.from_dict(_contact)

        notes = d.pop("notes", UNSET)

        location = cls(
            address=address,
            contact=contact,
            notes=notes,
        )

        location.additional_properties = d
        return location

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
