"""Article Routes — listing with topic/sort_by/order, detail, and vote PATCH.

Invariants:
    - GET /api/articles defaults to created_at DESC over all 12 seeded articles
    - Each query parameter fails with its own 400 message
    - Non-integer article ids are 400 Bad Request; unknown ids are 404
"""

import pytest

ARTICLE_KEYS = {
    "article_id", "title", "topic", "author", "body",
    "created_at", "votes", "comment_count",
}


def _is_sorted(values, descending):
    return values == sorted(values, reverse=descending)


# ─── GET /api/articles ───────────────────────────────────────────

async def test_list_articles_returns_all_with_comment_count(client):
    res = await client.get("/api/articles")
    assert res.status_code == 200
    articles = res.json()["articles"]
    assert len(articles) == 12
    for article in articles:
        assert ARTICLE_KEYS <= article.keys()
        assert isinstance(article["comment_count"], int)


async def test_list_articles_default_is_created_at_descending(client):
    res = await client.get("/api/articles")
    stamps = [a["created_at"] for a in res.json()["articles"]]
    assert _is_sorted(stamps, descending=True)


@pytest.mark.parametrize("order, descending", [
    ("asc", False), ("ASC", False), ("desc", True), ("DESC", True),
])
@pytest.mark.parametrize("sort_by", [
    "article_id", "created_at", "votes", "comment_count",
])
async def test_list_articles_sorted_by_column_and_order(
    client, sort_by, order, descending,
):
    res = await client.get(
        "/api/articles", params={"sort_by": sort_by, "order": order},
    )
    assert res.status_code == 200
    values = [a[sort_by] for a in res.json()["articles"]]
    assert len(values) == 12
    assert _is_sorted(values, descending)


async def test_list_articles_sorted_by_comment_count_desc_starts_with_article_1(client):
    res = await client.get("/api/articles?sort_by=comment_count")
    first = res.json()["articles"][0]
    assert first["article_id"] == 1
    assert first["comment_count"] == 11


@pytest.mark.parametrize("order", ["sideways", "ascending", "1", "desc;"])
async def test_invalid_order_is_400(client, order):
    res = await client.get("/api/articles", params={"order": order})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid order Query"}


@pytest.mark.parametrize("sort_by", ["title", "author", "VOTES", "1; DROP TABLE articles"])
async def test_invalid_sort_by_is_400(client, sort_by):
    res = await client.get("/api/articles", params={"sort_by": sort_by})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid sort_by Query"}


async def test_topic_filter_returns_only_that_topic(client):
    res = await client.get("/api/articles?topic=mitch")
    articles = res.json()["articles"]
    assert len(articles) == 11
    assert all(a["topic"] == "mitch" for a in articles)


async def test_existing_topic_without_articles_is_empty_list(client):
    res = await client.get("/api/articles?topic=paper")
    assert res.status_code == 200
    assert res.json() == {"articles": []}


async def test_unknown_topic_is_400(client):
    res = await client.get("/api/articles?topic=dogs")
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid topic Query"}


async def test_topic_sort_and_order_combine(client):
    res = await client.get(
        "/api/articles?topic=mitch&sort_by=article_id&order=asc",
    )
    ids = [a["article_id"] for a in res.json()["articles"]]
    assert ids == [1, 2, 3, 4, 6, 7, 8, 9, 10, 11, 12]


async def test_list_articles_is_idempotent(client):
    first = await client.get("/api/articles?sort_by=votes")
    second = await client.get("/api/articles?sort_by=votes")
    assert first.json() == second.json()


# ─── GET /api/articles/:article_id ───────────────────────────────

async def test_get_article_by_id(client):
    res = await client.get("/api/articles/2")
    assert res.status_code == 200
    article = res.json()["article"]
    assert article["article_id"] == 2
    assert article["title"] == "Sony Vaio; or, The Laptop"
    assert article["topic"] == "mitch"
    assert article["author"] == "icellusedkars"
    assert article["body"] == "Call me Mitchell. Some years ago.."
    assert article["created_at"].startswith("2020-10-16T06:03:00")
    assert article["votes"] == 0
    assert article["comment_count"] == 0


async def test_get_article_unknown_id_is_404(client):
    res = await client.get("/api/articles/999")
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_get_article_non_integer_id_is_400(client):
    res = await client.get("/api/articles/banana")
    assert res.status_code == 400
    assert res.json() == {"message": "Bad Request"}


# ─── PATCH /api/articles/:article_id ─────────────────────────────

async def test_patch_increments_votes(client):
    res = await client.patch("/api/articles/1", json={"inc_votes": 5})
    assert res.status_code == 200
    article = res.json()["article"]
    assert article["article_id"] == 1
    assert article["votes"] == 105


async def test_patch_decrements_votes_below_zero(client):
    res = await client.patch("/api/articles/2", json={"inc_votes": -5})
    assert res.status_code == 200
    assert res.json()["article"]["votes"] == -5


async def test_patch_is_persisted(client):
    await client.patch("/api/articles/1", json={"inc_votes": -5})
    res = await client.get("/api/articles/1")
    assert res.json()["article"]["votes"] == 95


@pytest.mark.parametrize("body", [
    {}, {"inc_votes": "five"}, {"inc_votes": "5"}, {"inc_votes": 1.5},
    {"votes": 1}, {"inc_votes": 2**63}, {"inc_votes": -(2**63)},
])
async def test_patch_malformed_body_is_400(client, body):
    res = await client.patch("/api/articles/1", json=body)
    assert res.status_code == 400
    assert res.json() == {"message": "Bad Request"}


async def test_patch_unknown_article_is_404(client):
    res = await client.patch("/api/articles/999", json={"inc_votes": 1})
    assert res.status_code == 404
    assert res.json() == {"message": "Not Found"}


async def test_patch_non_integer_id_is_400(client):
    res = await client.patch("/api/articles/one", json={"inc_votes": 1})
    assert res.status_code == 400
