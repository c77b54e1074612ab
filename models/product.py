# models/product.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ProductBase(BaseModel):
    name: str
    price: float = 0
    stock: int = 0
    color: Optional[str] = None

class ProductCreate(ProductBase):
    # submitted form; the field rules live here, not on the entity
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    price: float = Field(0, ge=0)
    stock: int = Field(0, ge=0)

class Product(ProductBase):
    id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
