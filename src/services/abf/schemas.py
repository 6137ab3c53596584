import xml.etree.ElementTree as ET
from typing import Any

from pydantic import BaseModel, Field

from common.errors import DecodeError

ROOT_TAG = "ABF"


class PickupError(BaseModel):
    """Error detail returned by ABF. Only meaningful when no confirmation number came back."""

    code: str = ""
    message: str = ""

    @staticmethod
    def from_element(element: ET.Element | None) -> "PickupError":
        if element is None:
            return PickupError()
        return PickupError(
            code=_child_text(element, "ERRORCODE"),
            message=_child_text(element, "ERRORMESSAGE"),
        )


class PickupResponse(BaseModel):
    confirmation_number: str = Field("", description="Only returned when the pickup was scheduled")
    ship: dict[str, Any] = Field(default_factory=dict, description="Shipper block as echoed by ABF")
    consignee: dict[str, Any] = Field(default_factory=dict, description="Consignee block as echoed by ABF")
    third_party: dict[str, Any] = Field(default_factory=dict, description="Third party billing block")
    num_errors: int = 0
    error: PickupError = Field(default_factory=PickupError)

    @property
    def succeeded(self) -> bool:
        # A confirmation number wins over whatever NUMERRORS says
        return bool(self.confirmation_number)

    @staticmethod
    def from_xml(body: bytes) -> "PickupResponse":
        """
        Parse an ABF pickup reply. Unknown elements are ignored and missing
        ones fall back to empty values.

        Raises:
            DecodeError: If the body is not well-formed XML with an ABF root,
                or NUMERRORS is not a whole number.
        """
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            raise DecodeError(f"response is not well-formed XML: {e}", body) from e

        if root.tag != ROOT_TAG:
            raise DecodeError(f"unexpected root element <{root.tag}>, expected <{ROOT_TAG}>", body)

        num_errors_text = _child_text(root, "NUMERRORS")
        try:
            num_errors = int(num_errors_text) if num_errors_text else 0
        except ValueError as e:
            raise DecodeError(f"NUMERRORS is not a number: {num_errors_text!r}", body) from e

        return PickupResponse(
            confirmation_number=_child_text(root, "CONFIRMATION"),
            ship=_block_to_dict(root.find("SHIP")),
            consignee=_block_to_dict(root.find("CONS")),
            third_party=_block_to_dict(root.find("TPB")),
            num_errors=num_errors,
            error=PickupError.from_element(root.find("ERROR")),
        )


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _element_value(element: ET.Element) -> Any:
    """Leaf elements become their text, elements with children become dicts."""
    if len(element) == 0:
        return (element.text or "").strip()

    value: dict[str, Any] = {}
    for child in element:
        child_value = _element_value(child)
        if child.tag not in value:
            value[child.tag] = child_value
        elif isinstance(value[child.tag], list):
            value[child.tag].append(child_value)
        else:
            # Repeated tags are collected in document order
            value[child.tag] = [value[child.tag], child_value]
    return value


def _block_to_dict(element: ET.Element | None) -> dict[str, Any]:
    """Capture one of ABF's undocumented echo blocks without assuming its shape."""
    if element is None:
        return {}
    value = _element_value(element)
    if isinstance(value, dict):
        return value
    return {"text": value} if value else {}
