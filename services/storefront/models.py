from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    price: int | float = Field(ge=0)
    rating: float = Field(ge=0.0, le=5.0)
    image: str
    category: str = Field(min_length=1)


class ProductListing(BaseModel):
    category: str
    products: list[Product] = Field(default_factory=list)
    count: int = 0


class StoreLinks(BaseModel):
    products: str
    product_details: str


class StoreFront(BaseModel):
    name: str
    url: str
    default_category: str
    categories: list[str] = Field(default_factory=list)
    links: StoreLinks
