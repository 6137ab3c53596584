from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# ABF accepts commodity lines numbered 1 through 15
MAX_COMMODITIES = 15


class PickupMode(str, Enum):
    """Test requests are accepted by ABF but never schedule a real pickup."""

    TEST = "test"
    LIVE = "live"

    @property
    def test_flag(self) -> str:
        return "N" if self is PickupMode.LIVE else "Y"


class RequesterType(str, Enum):
    """Who is asking ABF for the pickup."""

    SHIPPER = "1"
    CONSIGNEE = "2"
    THIRD_PARTY = "3"


class PayTerms(str, Enum):
    PREPAID = "P"
    COLLECT = "C"


class HandlingUnit:
    """Known handling unit codes. ABF does not publish the full list."""

    PALLET = "PLT"


class Commodity(BaseModel):
    """One good being shipped. All fields are optional, but ABF rejects lines that say too little."""

    model_config = ConfigDict(frozen=True)

    handling_units: int = Field(0, ge=0, description="Skid count (HN)")
    unit_type: str = Field("", description="Handling unit code, e.g. PLT (HT)")
    pieces: int = Field(0, ge=0, description="Piece count (PN)")
    pieces_type: str = Field("", description="Piece type code (PT)")
    weight: float = Field(0.0, ge=0, allow_inf_nan=False, description="Weight in lbs (WT)")
    freight_class: str = Field("", description="Freight class")
    nmfc: str = Field("", description="NMFC item number")
    nmfc_sub: str = Field("", description="NMFC sub code")
    cube: float = Field(0.0, ge=0, allow_inf_nan=False, description="Cubic feet")
    description: str = ""
    hazmat: bool = False


class PickupRequest(BaseModel):
    """The data sent to ABF to schedule a pickup."""

    model_config = ConfigDict(frozen=True)

    # Required by ABF
    requester_type: RequesterType
    pay_terms: PayTerms
    ship_contact: str = Field(..., description="Who to contact at the ship-from location")
    ship_name: str = Field(..., description="Company name at the ship-from location")
    ship_address: str
    ship_city: str
    ship_state: str = Field(..., description="Two character state code")
    ship_zip: str
    ship_country: str = Field(..., description="e.g. USA")
    ship_phone: str = Field(..., description="Digits only, xxxxxxxxxx")
    cons_city: str
    cons_state: str
    cons_zip: str
    cons_country: str = Field(..., description="Two character code, e.g. US")
    pickup_date: str = Field(..., description="mm/dd/yyyy")
    available_time: str = Field(..., description="Time goods are ready, hh:mm 24 hour")
    open_time: str = Field(..., description="Facility open time, hh:mm 24 hour")
    close_time: str = Field(..., description="Facility close time, hh:mm 24 hour")
    items: tuple[Commodity, ...] = Field(default_factory=tuple, description=f"Up to {MAX_COMMODITIES} commodities")

    # Optional
    api_key: str = Field("", description="ABF API key; the client's configured key is used when empty")
    requester_name: str = ""
    requester_email: str = ""
    requester_phone: str = ""
    requester_phone_ext: str = ""
    ship_name_plus: str = Field("", description="Extra name info")
    ship_phone_ext: str = ""
    ship_fax: str = ""
    ship_email: str = ""
    cons_contact: str = ""
    cons_name: str = ""
    cons_name_plus: str = ""
    cons_address: str = ""
    cons_phone: str = ""
    cons_phone_ext: str = ""
    cons_fax: str = ""
    cons_email: str = ""
    tpb_contact: str = ""
    tpb_name: str = ""
    tpb_name_plus: str = ""
    tpb_address: str = ""
    tpb_city: str = ""
    tpb_state: str = ""
    tpb_zip: str = ""
    tpb_country: str = ""
    tpb_phone: str = ""
    tpb_phone_ext: str = ""
    tpb_fax: str = ""
    tpb_email: str = ""
    bol: str = Field("", description="Bill of lading number (shipper reference)")
    po_number: str = Field("", description="Purchase order number (consignee reference)")
    customer_reference: str = Field("", description="Other customer reference, e.g. invoice number")
