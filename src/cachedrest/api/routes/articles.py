"""Article and comment endpoints.

These hold no state: reads return empty lists and writes echo what they
were given.
"""

from typing import Any

from fastapi import APIRouter, Body

router = APIRouter(tags=["articles"])


@router.get("/articles")
async def list_articles() -> list[Any]:
    return []


@router.post("/articles")
async def create_article(article: Any = Body(...)) -> Any:
    return article


@router.put("/articles/{article_id}")
async def update_article(article_id: str, article: Any = Body(...)) -> Any:
    return article


@router.delete("/articles/{article_id}")
async def delete_article(article_id: str) -> dict[str, str]:
    return {"deleted": article_id}


@router.get("/articles/{article_id}/comments")
async def list_comments(article_id: str) -> list[Any]:
    return []
