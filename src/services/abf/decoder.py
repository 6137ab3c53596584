from common.errors import CarrierRejectionError
from common.logging import get_logger
from services.abf.schemas import PickupResponse

logger = get_logger(__name__)


def interpret_response(body: bytes) -> PickupResponse:
    """
    Decode an ABF reply and decide whether the pickup was scheduled.

    A non-empty confirmation number is success, regardless of NUMERRORS.
    Anything else is a rejection, even when ABF sent no error code.

    Raises:
        DecodeError: If the body is not an ABF XML document.
        CarrierRejectionError: If ABF did not return a confirmation number.
    """
    response = PickupResponse.from_xml(body)

    if response.succeeded:
        logger.info(f"Pickup scheduled, confirmation number: {response.confirmation_number}")
        return response

    logger.warning(f"Pickup request rejected by ABF:\n{response.model_dump_json(indent=2)}")
    raise CarrierRejectionError(response.error.code, response.error.message, response)
