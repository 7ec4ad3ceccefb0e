import contextlib
import logging
from urllib.parse import urlencode

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from storefront.catalog import Catalog, ProductNotFound, get_catalog
from storefront.config import CORS_ORIGINS, DEFAULT_CATEGORY, LOG_LEVEL, STORE_NAME, STORE_URL
from storefront.mcp_tools import mcp
from storefront.models import Product, ProductListing, StoreFront, StoreLinks

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    catalog = get_catalog()
    logger.info(
        "Starting %s with %d products (legacy=%s)",
        STORE_NAME,
        len(catalog.products),
        catalog.legacy,
    )
    async with mcp.session_manager.run():
        yield


app = FastAPI(title="Storefront Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount MCP server at /mcp for tool auto-discovery
app.mount("/mcp", mcp.streamable_http_app())


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/")
async def home(catalog: Catalog = Depends(get_catalog)) -> StoreFront:
    return StoreFront(
        name=STORE_NAME,
        url=STORE_URL,
        default_category=DEFAULT_CATEGORY,
        categories=catalog.categories(),
        links=StoreLinks(
            products=f"{STORE_URL}/products?{urlencode({'category': DEFAULT_CATEGORY})}",
            product_details=f"{STORE_URL}/products/{{product_id}}",
        ),
    )


@app.get("/products")
async def list_category_products(
    category: str = DEFAULT_CATEGORY,
    catalog: Catalog = Depends(get_catalog),
) -> ProductListing:
    products = catalog.list_by_category(category)
    return ProductListing(category=category, products=products, count=len(products))


@app.get("/products/{product_id}")
async def get_product_details(
    product_id: int,
    catalog: Catalog = Depends(get_catalog),
) -> Product:
    try:
        return catalog.get_by_id(product_id)
    except ProductNotFound:
        logger.info("Product lookup miss for id %s", product_id)
        raise HTTPException(status_code=404, detail="Product not found")
