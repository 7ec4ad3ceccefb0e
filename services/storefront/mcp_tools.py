"""MCP tool definitions for the storefront catalog.

These tools expose the same read operations as the HTTP routes via the
Model Context Protocol, so AI agents can browse the phone catalog.
"""

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from storefront.catalog import ProductNotFound, get_catalog
from storefront.config import DEFAULT_CATEGORY, STORE_NAME

mcp = FastMCP(
    STORE_NAME,
    stateless_http=True,
    json_response=True,
    streamable_http_path="/",
    transport_security=TransportSecuritySettings(
        enable_dns_rebinding_protection=False,
    ),
)


@mcp.tool()
def browse_products(category: str = DEFAULT_CATEGORY) -> list[dict]:
    """Browse the product catalog. Returns the products in a category with
    their id, name, price, rating, image, and category.

    Args:
        category: Category to list (default "mobiles")
    """
    return [p.model_dump() for p in get_catalog().list_by_category(category)]


@mcp.tool()
def get_product_details(product_id: int) -> dict:
    """Get detailed information about a specific product.

    Args:
        product_id: The numeric product identifier (e.g. 2)
    """
    try:
        product = get_catalog().get_by_id(product_id)
    except ProductNotFound as e:
        return {"error": str(e)}
    return product.model_dump()
