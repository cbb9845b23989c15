"""
FastAPI routes for encyclopedia operations.

Provides HTTP endpoints for listing categories, viewing items and routing
free-text queries. Responses are structured data; rendering is left to the
client.
"""

from fastapi import APIRouter, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from loguru import logger

from .encyclopedia import Category, EncyclopediaManager, RetrievalError


class QueryRequest(BaseModel):
    """Request body for routing a free-text query."""

    query: str


def _parse_category(category: str) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown category '{category}'")


def init_encyclopedia_routes(
    manager: EncyclopediaManager,
    min_query_length: int = 2,
    default_line_break: str = "\n",
) -> APIRouter:
    """
    Create and return API routes for encyclopedia operations.

    Args:
        manager: EncyclopediaManager instance
        min_query_length: Minimum length of a trimmed query
        default_line_break: Soft line break used when the client does not pass one

    Returns:
        APIRouter: Configured router with encyclopedia endpoints
    """
    router = APIRouter(prefix="/encyclopedia", tags=["encyclopedia"])

    @router.get("/categories")
    async def list_categories():
        """List the available categories with their display titles."""
        return JSONResponse(
            status_code=200,
            content={
                "success": True,
                "data": [
                    {"id": category.value, "title": category.heading(manager.language)}
                    for category in Category
                ],
            },
        )

    @router.get("/categories/{category}")
    async def list_category(category: str):
        """
        List the items of a category.

        Args:
            category: Category identifier

        Returns:
            Item summaries (possibly empty)
        """
        parsed = _parse_category(category)
        try:
            items = await manager.list_category(parsed)

            return JSONResponse(
                status_code=200,
                content={
                    "success": True,
                    "data": {
                        "category": parsed.value,
                        "title": parsed.heading(manager.language),
                        "items": [
                            {
                                **item.model_dump(),
                                "display_description": item.display_description(
                                    manager.language
                                ),
                            }
                            for item in items
                        ],
                        "count": len(items),
                    },
                },
            )

        except Exception as e:
            logger.error(f"Failed to list category '{parsed.value}': {e}")
            raise HTTPException(status_code=500, detail=f"Listing failed: {str(e)}")

    @router.get("/categories/{category}/items/{item_id}")
    async def get_item(
        category: str,
        item_id: str,
        line_break: str | None = Query(
            None, description="Soft line break between lines of a paragraph"
        ),
    ):
        """
        Get one item, formatted into paragraphs.

        Args:
            category: Category identifier
            item_id: Item identifier

        Returns:
            Item view, or a 404 pointing back to the category listing
        """
        parsed = _parse_category(category)
        try:
            view = await manager.get_item(
                item_id,
                parsed,
                line_break=default_line_break if line_break is None else line_break,
            )

            return JSONResponse(
                status_code=200,
                content={"success": True, "data": jsonable_encoder(view)},
            )

        except RetrievalError as e:
            logger.warning(f"⚠️ Item '{item_id}' unavailable in '{parsed.value}': {e}")
            raise HTTPException(
                status_code=404,
                detail={
                    "message": "The requested details could not be loaded",
                    "category": parsed.value,
                    "back": f"{router.prefix}/categories/{parsed.value}",
                },
            )
        except Exception as e:
            logger.error(f"Failed to load item '{item_id}': {e}")
            raise HTTPException(status_code=500, detail=f"Item failed: {str(e)}")

    @router.post("/query")
    async def route_query(request: QueryRequest):
        """
        Route a free-text query to search or to the answer provider.

        Args:
            request: Query body

        Returns:
            Classification and search hits or answer
        """
        query = request.query.strip()
        if len(query) < min_query_length:
            raise HTTPException(
                status_code=400,
                detail=f"Query must be at least {min_query_length} characters long",
            )

        try:
            result = await manager.route_query(query)

            return JSONResponse(
                status_code=200,
                content={"success": True, "data": jsonable_encoder(result)},
            )

        except Exception as e:
            logger.error(f"Failed to route query: {e}")
            raise HTTPException(status_code=500, detail=f"Query failed: {str(e)}")

    return router
