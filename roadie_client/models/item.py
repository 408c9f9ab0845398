from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="Item")


@_attrs_define
class Item:
    """A physical good included in an estimate or shipment.

    Length limits are enforced by the API, not by this client.

    Attributes:
        length (float): Length of the item in inches
        width (float): Width of the item in inches
        height (float): Height of the item in inches
        weight (float): Weight of the item in pounds
        quantity (int): Number of these items in the shipment
        value (float): Monetary value of the item
        description (str | Unset): Description of the item. Max length 200 characters
        reference_id (str | Unset): Caller supplied ID for the item. Max length 100 characters
    """

    length: float
    width: float
    height: float
    weight: float
    quantity: int
    value: float
    description: str | Unset = UNSET
    reference_id: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "length": self.length,
                "width": self.width,
                "height": self.height,
                "weight": self.weight,
                "quantity": self.quantity,
                "value": self.value,
            }
        )
        if self.description is not UNSET:
            field_dict["description"] = self.description
        if self.reference_id is not UNSET:
            field_dict["reference_id"] = self.reference_id

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        length = d.pop("length")

        width = d.pop("width")

        height = d.pop("height")

        weight = d.pop("weight")

        quantity = d.pop("quantity")

        value = d.pop("value")

        description = d.pop("description", UNSET)

        reference_id = d.pop("reference_id", UNSET)

        item = cls(
            length=length,
            width=width,
            height=height,
            weight=weight,
            quantity=quantity,
            value=value,
            description=description,
            reference_id=reference_id,
        )

        item.additional_properties = d
        return item

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
