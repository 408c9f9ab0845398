from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="DeliveryOptions")


@_attrs_define
class DeliveryOptions:
    """Constraints the driver has to meet for a delivery.

    Attributes:
        signature_required (bool): Driver must collect a signature from the recipient
        notifications_enabled (bool | Unset): Recipient receives SMS updates for the delivery
        over_21_required (bool | Unset): Driver must be over 21 (typically alcohol deliveries)
        extra_compensation (float | Unset): Additional compensation for the driver prior to assignment
        trailer_required (bool | Unset): Driver must use a trailer to deliver the items
    """

    signature_required: bool
    notifications_enabled: bool | Unset = UNSET
    over_21_required: bool | Unset = UNSET
    extra_compensation: float | Unset = UNSET
    trailer_required: bool | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "signature_required": self.signature_required,
            }
        )
        if self.notifications_enabled is not UNSET:
            field_dict["notifications_enabled"] = self.notifications_enabled
        if self.over_21_required is not UNSET:
            field_dict["over_21_required"] = self.over_21_required
        if self.extra_compensation is not UNSET:
            field_dict["extra_compensation"] = self.extra_compensation
        if self.trailer_required is not UNSET:
            field_dict["trailer_required"] = self.trailer_required

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        signature_required = d.pop("signature_required", False)

        notifications_enabled = d.pop("notifications_enabled", UNSET)

        over_21_required = d.pop("over_21_required", UNSET)

        extra_compensation = d.pop("extra_compensation", UNSET)

        trailer_required = d.pop("trailer_required", UNSET)

        delivery_options = cls(
            signature_required=signature_required,
            notifications_enabled=notifications_enabled,
            over_21_required=over_21_required,
            extra_compensation=extra_compensation,
            trailer_required=trailer_required,
        )

        delivery_options.additional_properties = d
        return delivery_options

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
