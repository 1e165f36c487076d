"""Reference Fixture — the small dataset tests and local development run against.

Invariants:
    - 3 topics, 4 users, 12 articles, 18 comments
    - Topic "paper" has no articles; user "lurker" has authored nothing
    - Article 2 has no comments; comment 2 belongs to article 1
    - Articles and comments listed in id order (ids are assigned on insert)
    - created_at given as epoch milliseconds, converted by db/seed.py
"""

TOPICS = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

USERS = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

_IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

ARTICLES = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": 1594329060000,
        "votes": 100,
        "article_img_url": _IMG,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago..",
        "created_at": 1602828180000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Eight pug gifs that remind me of why I love the internet",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": 1604394720000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style. However, the volume of his typing has ALLEGEDLY burst another students eardrums, and they are now suing for damages",
        "created_at": 1588731240000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": 1596464040000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": 1602986400000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": 1578406080000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity, and it has an uncanny resemblance to Mitch. Surely I am not the only person who can see this?!",
        "created_at": 1587089280000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": 1591438200000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": 1589433300000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall blankly, like a cat. Does this make me a cat?",
        "created_at": 1579126860000,
        "votes": 0,
        "article_img_url": _IMG,
    },
    {
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": 1602419040000,
        "votes": 0,
        "article_img_url": _IMG,
    },
]

COMMENTS = [
    {"article_id": 9, "author": "butter_bridge", "votes": 16, "created_at": 1586179020000,
     "body": "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!"},
    {"article_id": 1, "author": "butter_bridge", "votes": 14, "created_at": 1604113380000,
     "body": "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets these are; not cotton, not rayon, silky."},
    {"article_id": 1, "author": "icellusedkars", "votes": 100, "created_at": 1583025180000,
     "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones is a form of fashion suicide, but, uh, call me crazy, on you it works."},
    {"article_id": 1, "author": "icellusedkars", "votes": -100, "created_at": 1582459260000,
     "body": " I carry a log, yes. Is it funny to you? It is not to me."},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1604437200000,
     "body": "I hate streaming noses"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1586642520000,
     "body": "I hate streaming eyes even more"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1589577540000,
     "body": "Lobster pot"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1586899140000,
     "body": "Delicious crackerbreads"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1577848080000,
     "body": "Superficially charming"},
    {"article_id": 3, "author": "icellusedkars", "votes": 0, "created_at": 1592641440000,
     "body": "git push origin master"},
    {"article_id": 3, "author": "icellusedkars", "votes": 0, "created_at": 1600560600000,
     "body": "Ambidextrous marsupial"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1583133000000,
     "body": "Massive intercranial brain haemorrhage"},
    {"article_id": 1, "author": "icellusedkars", "votes": 0, "created_at": 1592220300000,
     "body": "Fruit pastilles"},
    {"article_id": 5, "author": "icellusedkars", "votes": 16, "created_at": 1591682400000,
     "body": "What do you see? I have no idea where this will lead us. This place I speak of, is known as the Black Lodge."},
    {"article_id": 5, "author": "butter_bridge", "votes": 1, "created_at": 1606176480000,
     "body": "I am 100% sure that we're not completely sure."},
    {"article_id": 6, "author": "butter_bridge", "votes": 1, "created_at": 1601820360000,
     "body": "This is a bad article name"},
    {"article_id": 9, "author": "icellusedkars", "votes": 20, "created_at": 1584205320000,
     "body": "The owls are not what they seem."},
    {"article_id": 1, "author": "butter_bridge", "votes": 16, "created_at": 1595294400000,
     "body": "This morning, I showered for nine minutes."},
]

REFERENCE_DATA = {
    "topics": TOPICS,
    "users": USERS,
    "articles": ARTICLES,
    "comments": COMMENTS,
}
