from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="CancelShipmentRequest")


@_attrs_define
class CancelShipmentRequest:
    """Body of `DELETE /shipments/{id}`.

    Attributes:
        cancellation_code (str): Reason code, e.g. `customer_request`
        cancellation_comment (str | Unset): Free-text explanation
    """

    cancellation_code: str
    cancellation_comment: str | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "cancellation_code": self.cancellation_code,
            }
        )
        if self.cancellation_comment is not UNSET:
            field_dict["cancellation_comment"] = self.cancellation_comment

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        cancellation_code = d.pop("cancellation_code")

        cancellation_comment = d.pop("cancellation_comment", UNSET)

        cancel_shipment_request = cls(
            cancellation_code=cancellation_code,
            cancellation_comment=cancellation_comment,
        )

        cancel_shipment_request.additional_properties = d
        return cancel_shipment_request

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
