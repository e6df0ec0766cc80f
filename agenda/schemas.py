# agenda/schemas.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

# The four business fields a client may submit
class ContactFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    surname: str = ""
    email: str = ""
    phone: str = ""

# Contact as returned by the API
class Contact(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # builds from SQLAlchemy rows

    id: str
    name: str
    surname: str
    email: str
    phone: str
    created_at: datetime

# Body of a 422 response
class ValidationErrors(BaseModel):
    errors: List[str]
