"""Statement Pydantic schemas."""


from datetime import datetime

from app.schemas.common import CamelModel

class StatementUpload(CamelModel):
    url: str = ""

class StatementOut(CamelModel):
    id: str
    company_id: str
    url: str
    uploaded_by: str
    uploaded_at: datetime
