"""Company Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel

class CompanyPayload(CamelModel):
    """Full set of descriptive fields; used for both create and (replacing) update.

    ``name`` and ``category`` default to empty so the service can report a
    missing value as a bad payload.
    """

    name: str = ""
    category: str = ""
    address: str | None = None
    city: str | None = None
    province: str | None = None
    country: str | None = None
    postal_code: str | None = None
    email: str | None = None
    phone: str | None = None
    division_names: list[str] = Field(default_factory=list)

class CompanyOut(CompanyPayload):
    id: str
    created_at: datetime
    updated_at: datetime

class CompanyCreatedOut(CamelModel):
    company_id: str
    executive_id: str
