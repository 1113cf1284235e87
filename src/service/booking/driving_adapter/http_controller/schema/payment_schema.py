from typing import List

from pydantic import BaseModel, Field


class CheckoutSessionRequest(BaseModel):
    seats: List[str]
    total_price: float = Field(gt=0, allow_inf_nan=False)

    class Config:
        json_schema_extra = {'example': {'seats': ['A1', 'A2'], 'total_price': 20.0}}


class CheckoutSessionResponse(BaseModel):
    url: str
