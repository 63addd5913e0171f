"""Example: async validation of a blog post loaded from storage."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field

from maybe_pydantic import Schema, async_maybe


class Post(BaseModel):
    title: str = Field(..., min_length=10, max_length=100)
    content: str = Field(..., min_length=100)
    tags: list[Annotated[str, Field(max_length=15)]] = Field(
        default_factory=list, max_length=5
    )
    publish_date: datetime


def in_the_future(post: Post) -> bool:
    return post.publish_date > datetime.now(timezone.utc)


post_schema = Schema(Post).refine(
    in_the_future, "Publish date must be in the future", path=("publish_date",)
)

invalid_post = {
    "title": "Short",
    "content": "Too brief...",
    "tags": ["tag1", "tag2", "tag3", "tag4", "tag5", "tag6"],
    "publish_date": datetime(2020, 1, 1, tzinfo=timezone.utc),
}


async def load_post() -> dict[str, object]:
    await asyncio.sleep(0.01)
    return invalid_post


async def load_post_failing() -> dict[str, object]:
    await asyncio.sleep(0.01)
    raise ConnectionError("storage unavailable")


async def main() -> None:
    publish = async_maybe(lambda post: post.title, post_schema)

    error, _ = await publish(load_post())
    print("Blog Post Errors:", error)

    error, _ = await publish(load_post_failing())
    print("\nStorage failure:", error)


if __name__ == "__main__":
    asyncio.run(main())
