import requests

from common.config import config
from common.errors import handle_transport_errors
from common.logging import get_logger, mask_secret
from models.pickup import PickupMode, PickupRequest
from services.abf.decoder import interpret_response
from services.abf.encoder import encode_form, encode_pickup_request
from services.abf.schemas import PickupResponse

logger = get_logger(__name__)

CONTENT_TYPE = "application/x-www-form-urlencoded"


class AbfPickupClient:
    """
    Schedules truck pickups with ABF Freight.

    Mode, timeout and credentials are fixed when the client is built, so one
    client can be shared across threads. Test mode is the default: ABF accepts
    the request but no driver is dispatched. Nothing is retried.

    Example:
        client = AbfPickupClient()
        response = client.request_pickup(request)
        print(response.confirmation_number)

        live = client.with_mode(PickupMode.LIVE).with_timeout(30)
    """

    def __init__(
        self,
        api_key: str | None = None,
        mode: PickupMode | str | None = None,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else config.abf_api_key.get_secret_value()
        self.mode = PickupMode(mode if mode is not None else config.abf_mode)
        self.timeout = timeout if timeout is not None else config.abf_timeout
        self.url = url or config.abf_pickup_url

    def with_mode(self, mode: PickupMode | str) -> "AbfPickupClient":
        return AbfPickupClient(api_key=self.api_key, mode=mode, timeout=self.timeout, url=self.url)

    def with_timeout(self, seconds: float) -> "AbfPickupClient":
        return AbfPickupClient(api_key=self.api_key, mode=self.mode, timeout=seconds, url=self.url)

    def build_form(self, request: PickupRequest) -> list[tuple[str, str]]:
        """Form fields for a request, using the client's API key when the request carries none."""
        if not request.api_key:
            request = request.model_copy(update={"api_key": self.api_key})
        return encode_pickup_request(request, self.mode)

    def request_pickup(self, request: PickupRequest) -> PickupResponse:
        """
        Submit a pickup request and return ABF's reply.

        Raises:
            PickupValidationError: Before any network call, if the request is structurally invalid.
            TransportError: If the POST failed, timed out or returned an error status.
            DecodeError: If ABF's reply is not the expected XML.
            CarrierRejectionError: If ABF did not return a confirmation number.
        """
        fields = self.build_form(request)
        body = encode_form(fields)

        masked = [(key, mask_secret(value) if key == "ID" else value) for key, value in fields]
        logger.debug(f"Requesting {self.mode.value} pickup for {request.ship_name}: {encode_form(masked)}")

        with handle_transport_errors("RequestPickup"):
            response = requests.post(
                self.url,
                data=body,
                headers={"Content-Type": CONTENT_TYPE},
                timeout=self.timeout,
            )
            response.raise_for_status()

        return interpret_response(response.content)
