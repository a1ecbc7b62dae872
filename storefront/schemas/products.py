from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from storefront.errors import ErrorKind


class ProductImage(BaseModel):
    url: str


class ProductFields(BaseModel):
    name: str
    price: StrictInt
    image: List[ProductImage] = Field(..., min_length=1)


class ProductRecord(BaseModel):
    """One element of the catalog API response."""

    id: Optional[Union[str, int]] = None
    fields: ProductFields


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: int
    image_url: str
    id: Optional[Union[str, int]] = None

    @classmethod
    def from_record(cls, record: ProductRecord) -> "Product":
        return cls(
            id=record.id,
            name=record.fields.name,
            price=record.fields.price,
            image_url=record.fields.image[0].url,
        )


class LoadResult(BaseModel):
    ok: bool
    products: List[Product] = Field(default_factory=list)
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, products: List[Product]) -> "LoadResult":
        return cls(ok=True, products=list(products))

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> "LoadResult":
        return cls(ok=False, error_kind=kind, error_message=message, status_code=status_code)


class ViewState(str, Enum):
    LOADING = "loading"
    CONTENT = "content"


class ProductOut(BaseModel):
    name: str
    price: int
    formatted_price: str
    image_url: str


class CatalogResponse(BaseModel):
    state: ViewState
    count: int
    products: List[ProductOut]
    error: Optional[ErrorKind] = None
