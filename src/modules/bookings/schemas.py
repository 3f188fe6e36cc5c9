# src/modules/bookings/schemas.py

from typing import Optional, Union

from pydantic import BaseModel, EmailStr

class UserDetails(BaseModel):
    """Contact block sent as the JSON-encoded `userDetails` form field."""
    name: str
    email: EmailStr
    phone: Optional[Union[str, int, float]] = None

    model_config = {"extra": "ignore"}
