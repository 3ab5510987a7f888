"""Request models for the cart API."""
from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    product_id: int


class ChangeQuantityRequest(BaseModel):
    product_id: int
    delta: int = Field(default=1, description="Signed change, usually +1 or -1")
