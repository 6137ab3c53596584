"""
Encode a PickupRequest into the flat form fields the ABF pickup API expects.

ABF takes a pickup as url-encoded form parameters. Repeated commodity
attributes are sent as numbered keys (HN1, HT1, ... HN15) rather than as a
nested structure, so a line item's number must match its position in the list.
"""

from enum import Enum
from urllib.parse import urlencode

from common.errors import PickupValidationError
from models.pickup import MAX_COMMODITIES, Commodity, PickupMode, PickupRequest

# Carrier field name -> PickupRequest attribute, in the order they are sent
PICKUP_FIELD_MAPPING: list[tuple[str, str]] = [
    ("ID", "api_key"),
    ("RequesterType", "requester_type"),
    ("PayTerms", "pay_terms"),
    ("RequesterName", "requester_name"),
    ("RequesterEmail", "requester_email"),
    ("RequesterPhone", "requester_phone"),
    ("RequesterPhoneExt", "requester_phone_ext"),
    ("ShipContact", "ship_contact"),
    ("ShipName", "ship_name"),
    ("ShipNamePlus", "ship_name_plus"),
    ("ShipAddress", "ship_address"),
    ("ShipCity", "ship_city"),
    ("ShipState", "ship_state"),
    ("ShipZip", "ship_zip"),
    ("ShipCountry", "ship_country"),
    ("ShipPhone", "ship_phone"),
    ("ShipPhoneExt", "ship_phone_ext"),
    ("ShipFax", "ship_fax"),
    ("ShipEmail", "ship_email"),
    ("ConsContact", "cons_contact"),
    ("ConsName", "cons_name"),
    ("ConsNamePlus", "cons_name_plus"),
    ("ConsAddress", "cons_address"),
    ("ConsCity", "cons_city"),
    ("ConsState", "cons_state"),
    ("ConsZip", "cons_zip"),
    ("ConsCountry", "cons_country"),
    ("ConsPhone", "cons_phone"),
    ("ConsPhoneExt", "cons_phone_ext"),
    ("ConsFax", "cons_fax"),
    ("ConsEmail", "cons_email"),
    ("TPBContact", "tpb_contact"),
    ("TPBName", "tpb_name"),
    ("TPBNamePlus", "tpb_name_plus"),
    ("TPBAddress", "tpb_address"),
    ("TPBCity", "tpb_city"),
    ("TPBState", "tpb_state"),
    ("TPBZip", "tpb_zip"),
    ("TPBCountry", "tpb_country"),
    ("TPBPhone", "tpb_phone"),
    ("TPBPhoneExt", "tpb_phone_ext"),
    ("TPBFax", "tpb_fax"),
    ("TPBEmail", "tpb_email"),
    ("PickupDate", "pickup_date"),
    ("AT", "available_time"),
    ("OT", "open_time"),
    ("CT", "close_time"),
    ("Bol", "bol"),
    ("PO1", "po_number"),
    ("CRN1", "customer_reference"),
]

TEST_FIELD = "Test"

# Base names of the numbered commodity keys, e.g. HN1 = handling units of the first line
COMMODITY_FIELD_PREFIXES = ("HN", "HT", "PN", "PT", "WT")


def format_weight(weight: float) -> str:
    """Whole pounds, rounded to nearest (ties to even): 42.7 -> "43", 42.5 -> "42"."""
    # -0.0 would otherwise format as "-0"
    return f"{abs(weight):.0f}"


def encode_commodity(item: Commodity, number: int) -> list[tuple[str, str]]:
    """Numbered keys for one commodity line; `number` is the carrier's 1-based line number."""
    return [
        (f"HN{number}", str(item.handling_units)),
        (f"HT{number}", item.unit_type),
        (f"PN{number}", str(item.pieces)),
        (f"PT{number}", item.pieces_type),
        (f"WT{number}", format_weight(item.weight)),
    ]


def encode_pickup_request(request: PickupRequest, mode: PickupMode = PickupMode.TEST) -> list[tuple[str, str]]:
    """
    Build the ordered form fields for a pickup request.

    Every top-level field is sent, unset optional ones as empty strings. The
    test flag follows the top-level fields, then the numbered commodity keys.

    Raises:
        PickupValidationError: If the request carries more commodities than ABF accepts.
    """
    if len(request.items) > MAX_COMMODITIES:
        raise PickupValidationError(
            f"pickup request has {len(request.items)} commodities, ABF accepts at most {MAX_COMMODITIES}"
        )

    fields: list[tuple[str, str]] = []
    for key, attribute in PICKUP_FIELD_MAPPING:
        value = getattr(request, attribute)
        if isinstance(value, Enum):
            value = value.value
        fields.append((key, value))

    fields.append((TEST_FIELD, mode.test_flag))

    for number, item in enumerate(request.items, start=1):
        fields.extend(encode_commodity(item, number))

    return fields


def encode_form(fields: list[tuple[str, str]]) -> str:
    """URL-encode the form fields into a request body."""
    return urlencode(fields)
