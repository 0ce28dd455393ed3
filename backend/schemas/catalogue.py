from datetime import datetime
from typing import List, NewType, Optional

from pydantic import Field, constr

from backend.core.schemas import CamelModel, PatchModel

NameStr = NewType("NameStr", constr(strip_whitespace=True, min_length=1, max_length=255))


class CategoryCreate(CamelModel):
    name: NameStr


class CategoryUpdate(PatchModel):
    not_null = ("name",)

    name: Optional[NameStr] = None


class PriceOptionCreate(CamelModel):
    label: constr(strip_whitespace=True, min_length=1, max_length=100)
    value: float = Field(ge=0)


class PriceOptionUpdate(PatchModel):
    not_null = ("label", "value")

    label: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    value: Optional[float] = Field(default=None, ge=0)


class PriceOptionOut(CamelModel):
    id: int
    category_id: int
    label: str
    value: float


class CategoryOut(CamelModel):
    id: int
    name: str
    price_options: List[PriceOptionOut] = []
    created_at: Optional[datetime] = None


class ProductCreate(CamelModel):
    product_code: constr(strip_whitespace=True, min_length=1, max_length=50)
    product_name: NameStr
    description: Optional[str] = None
    category_id: Optional[int] = None
    unit_of_measure: str = "pcs"
    cost_price: float = Field(default=0, ge=0)
    selling_price: float = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)
    current_stock: int = Field(default=0, ge=0)
    image_url: Optional[str] = None
    is_active: bool = True


class ProductUpdate(PatchModel):
    not_null = ("product_code", "product_name", "unit_of_measure", "cost_price", "selling_price",
                "reorder_level", "current_stock", "is_active")

    product_code: Optional[constr(strip_whitespace=True, min_length=1, max_length=50)] = None
    product_name: Optional[NameStr] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    unit_of_measure: Optional[str] = None
    cost_price: Optional[float] = Field(default=None, ge=0)
    selling_price: Optional[float] = Field(default=None, ge=0)
    reorder_level: Optional[int] = Field(default=None, ge=0)
    current_stock: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    is_active: Optional[bool] = None


class ProductOut(CamelModel):
    id: int
    product_code: str
    product_name: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    unit_of_measure: str
    cost_price: float
    selling_price: float
    reorder_level: int
    current_stock: int
    image_url: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
