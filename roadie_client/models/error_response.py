from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

if TYPE_CHECKING:
    from ..models.error_detail import ErrorDetail


T = TypeVar("T", bound="ErrorResponse")


@_attrs_define
class ErrorResponse:
    """Error payload returned by the API on failure, and embedded in some success bodies.

    Attributes:
        errors (list[ErrorDetail]):
    """

    errors: list[ErrorDetail] = _attrs_field(factory=list)
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def messages(self) -> list[str]:
        """Readable one-liners for each error, prefixed with the offending parameter."""
        lines = []
        for error in self.errors:
            text = error.message or error.code or "unknown error"
            if error.parameter:
                text = f"{error.parameter}: {text}"
            lines.append(text)
        return lines

    def to_dict(self) -> dict[str, Any]:
        errors = []
        for errors_item_data in self.errors:
            errors_item = errors_item_data.to_dict()
            errors.append(errors_item)

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "errors": errors,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.error_detail import ErrorDetail

        d = dict(src_dict)
        errors = []
        _errors = d.pop("errors", None) or []
        # Some endpoints answer with a single string or a list of strings.
        if isinstance(_errors, (str, Mapping)):
            _errors = [_errors]
        for errors_item_data in _errors:
            if isinstance(errors_item_data, Mapping):
                errors_item = ErrorDetail.from_dict(errors_item_data)
            else:
                errors_item = ErrorDetail(message=str(errors_item_data))

            errors.append(errors_item)

        error_response = cls(
            errors=errors,
        )

        error_response.additional_properties = d
        return error_response

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
