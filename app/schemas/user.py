from datetime import datetime

from app.domain.enums import Role
from app.schemas.common import CamelModel

class UserOut(CamelModel):
    id: str
    role: Role
    related_id: str
    created_at: datetime
