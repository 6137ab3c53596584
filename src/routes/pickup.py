"""Pickup scheduling endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from common.errors import CarrierRejectionError, DecodeError, PickupValidationError, TransportError
from common.logging import get_logger
from models.pickup import PickupRequest
from services.abf.client import AbfPickupClient
from services.abf.schemas import PickupResponse

logger = get_logger(__name__)
router = APIRouter(prefix="/api", tags=["pickup"])


def get_pickup_client() -> AbfPickupClient:
    return AbfPickupClient()


@router.post("/pickup", response_model=PickupResponse)
def request_pickup_endpoint(request: PickupRequest, client: AbfPickupClient = Depends(get_pickup_client)):
    """
    Schedule a pickup with ABF.

    Returns the decoded ABF reply with its confirmation number. Errors map to:
    - 422 when the request is invalid or ABF rejects it (detail carries ABF's code and message)
    - 502 when ABF cannot be reached or answers with something unreadable

    Example request:
        ```json
        {
            "requester_type": "1",
            "pay_terms": "P",
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
            "items": [{"handling_units": 1, "unit_type": "PLT", "weight": 500}]
        }
        ```
    """
    try:
        return client.request_pickup(request)
    except PickupValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except CarrierRejectionError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message}) from e
    except (TransportError, DecodeError) as e:
        logger.error(f"Pickup request failed for {request.ship_name}: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e
