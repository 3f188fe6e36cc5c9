# src/modules/contact/schemas.py

from typing import Optional, Union

from pydantic import BaseModel, EmailStr

class ContactFormRequest(BaseModel):
    name: str
    email: EmailStr
    phone: Optional[Union[str, int, float]] = None
    subject: str
    message: str

    model_config = {"from_attributes": True}
