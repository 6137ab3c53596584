import pytest

from models.pickup import Commodity, HandlingUnit, PayTerms, PickupRequest, RequesterType


def make_request(items: list[Commodity] | None = None, **overrides) -> PickupRequest:
    """Create a PickupRequest with every required field filled in."""
    fields = {
        "requester_type": RequesterType.SHIPPER,
        "pay_terms": PayTerms.PREPAID,
        "ship_contact": "Jane Doe",
        "ship_name": "Acme Widgets",
        "ship_address": "1 Main St",
        "ship_city": "Fort Smith",
        "ship_state": "AR",
        "ship_zip": "72901",
        "ship_country": "USA",
        "ship_phone": "4795551234",
        "cons_city": "Tulsa",
        "cons_state": "OK",
        "cons_zip": "74103",
        "cons_country": "US",
        "pickup_date": "10/20/2026",
        "available_time": "09:00",
        "open_time": "09:00",
        "close_time": "17:00",
        "items": items or [],
    }
    fields.update(overrides)
    return PickupRequest(**fields)


def make_items(count: int) -> list[Commodity]:
    return [
        Commodity(handling_units=1, unit_type=HandlingUnit.PALLET, pieces=i, pieces_type="BOX", weight=100.0 * i)
        for i in range(1, count + 1)
    ]


@pytest.fixture
def pickup_request() -> PickupRequest:
    return make_request(
        items=make_items(2),
        api_key="abf-test-key-1234",
        bol="BOL-77",
        po_number="PO-12",
    )


SUCCESS_BODY = b"<ABF><CONFIRMATION>ABC123</CONFIRMATION><NUMERRORS>0</NUMERRORS></ABF>"

REJECTION_BODY = (
    b"<ABF><NUMERRORS>1</NUMERRORS>"
    b"<ERROR><ERRORCODE>E01</ERRORCODE><ERRORMESSAGE>Missing zip</ERRORMESSAGE></ERROR></ABF>"
)
