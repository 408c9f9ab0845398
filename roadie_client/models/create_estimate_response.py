from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.error_response import ErrorResponse


T = TypeVar("T", bound="CreateEstimateResponse")


@_attrs_define
class CreateEstimateResponse:
    """
    Attributes:
        price (float | Unset): Estimated price
        size (str | Unset): Size category, e.g. `small`, `medium`, `large`
        estimated_distance (float | Unset): Estimated distance between pickup and delivery, in miles
        errors (ErrorResponse | Unset): Errors the API embedded in an otherwise successful response
    """

    price: float | Unset = UNSET
    size: str | Unset = UNSET
    estimated_distance: float | Unset = UNSET
    errors: ErrorResponse | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        errors: list[dict[str, Any]] | Unset = UNSET
        if not isinstance(self.errors, Unset):
            errors = self.errors.to_dict()["errors"]

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if self.price is not UNSET:
            field_dict["price"] = self.price
        if self.size is not UNSET:
            field_dict["size"] = self.size
        if self.estimated_distance is not UNSET:
            field_dict["estimated_distance"] = self.estimated_distance
        if errors is not UNSET:
            field_dict["errors"] = errors

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.error_response import ErrorResponse

        d = dict(src_dict)
        price = d.pop("price", UNSET)

        size = d.pop("size", UNSET)

        estimated_distance = d.pop("estimated_distance", UNSET)

        # Embedded either as a full error object or as its bare `errors` list.
        _errors = d.pop("errors", UNSET)
        errors: ErrorResponse | Unset
        if isinstance(_errors, Unset) or _errors is None:
            errors = UNSET
        elif isinstance(_errors, Mapping):
            errors = ErrorResponse.from_dict(_errors)
        else:
            errors = ErrorResponse.from_dict({"errors": _errors})

        create_estimate_response = cls(
            price=price,
            size=size,
            estimated_distance=estimated_distance,
            errors=errors,
        )

        create_estimate_response.additional_properties = d
        return create_estimate_response

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
