"""API Index — GET /api describes every available endpoint.

Invariants:
    - ENDPOINTS lists exactly the routes registered in main.py (health excluded)
    - Static document: no DB access
"""

from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["meta"])

ENDPOINTS = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
        },
    },
    "GET /api/articles": {
        "description": "serves an array of all articles with their comment_count",
        "queries": ["topic", "sort_by", "order"],
        "sort_by": ["article_id", "created_at", "votes", "comment_count"],
        "order": ["asc", "desc"],
        "exampleResponse": {
            "articles": [
                {
                    "article_id": 1,
                    "title": "Seafood substitutions are increasing",
                    "topic": "cooking",
                    "author": "weegembump",
                    "body": "Text from the article..",
                    "created_at": "2018-05-30T15:59:13.341Z",
                    "votes": 0,
                    "comment_count": 6,
                },
            ],
        },
    },
    "GET /api/articles/:article_id": {
        "description": "serves the article with the given id, including comment_count",
        "queries": [],
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes (may be negative) to the article's votes and serves the updated article",
        "exampleRequest": {"inc_votes": 1},
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of the article's comments, newest first",
        "queries": [],
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment by an existing user to the article and serves it",
        "exampleRequest": {"username": "butter_bridge", "body": "Nice article"},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the comment, responds 204 with no content",
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
    },
    "GET /api/users/:username": {
        "description": "serves the user with the given username",
    },
}


@router.get("")
async def get_endpoints():
    """Describe every endpoint."""
    return {"endpoints": ENDPOINTS}
