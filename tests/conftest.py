"""
RSS输出测试的公共fixture
"""
from datetime import datetime, timezone

import pytest

from feeds.feed import Feed, Item, Link, Author, Image, MediaContent


@pytest.fixture
def created():
    return datetime(2021, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def updated():
    return datetime(2021, 3, 15, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def full_item(created, updated):
    """条目：所有字段都已填写"""
    return Item(
        title="Release 1.0",
        link=Link(href="http://x/1"),
        description="First stable release",
        content="<p>Full <b>release</b> notes</p>",
        author=Author(name="Alice", email="alice@example.com"),
        category="news",
        id="tag:x,2021:1",
        created=created,
        updated=updated,
        source=Link(href="http://x/source"),
        media=MediaContent(
            url="http://x/cover.png",
            type="image/png",
            length="2048",
            keywords="release, cover",
            title="Cover image"
        )
    )


@pytest.fixture
def minimal_feed(created):
    """单条目Feed"""
    return Feed(
        title="T",
        link=Link(href="http://x/"),
        description="D",
        items=[
            Item(
                title="I",
                link=Link(href="http://x/1"),
                description="ID",
                created=created
            )
        ]
    )


@pytest.fixture
def full_feed(created, updated, full_item):
    """带作者、图标、多条目的Feed"""
    return Feed(
        title="Project News",
        link=Link(href="http://x/"),
        description="Updates from the project",
        author=Author(name="Alice", email="alice@example.com"),
        created=created,
        updated=updated,
        copyright="(c) 2021 Project",
        image=Image(url="http://x/logo.png", title="Logo", link="http://x/", width=64, height=32),
        items=[
            full_item,
            Item(title="Second", link=Link(href="http://x/2"), description="Second item"),
            Item(title="Third", link=Link(href="http://x/3"), description="Third item"),
        ]
    )
