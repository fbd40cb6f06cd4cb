"""Grouping of sorted images into synthetic feed posts."""

from __future__ import annotations

import logging
import random
from datetime import UTC, date, datetime, tzinfo
from typing import TYPE_CHECKING
from urllib.parse import quote

from photo_feed.config import DEFAULT_DESCRIPTION_TEMPLATE
from photo_feed.photos.models import Post
from photo_feed.photos.timestamps import group_timestamp

if TYPE_CHECKING:
    from photo_feed.graph.models import DriveItem
    from photo_feed.photos.models import Profile

logger = logging.getLogger(__name__)

IMAGE_PROXY_PATH = "/api/image"

# likes are drawn from [MIN_LIKES, MAX_LIKES)
MIN_LIKES = 10
MAX_LIKES = 210

ORIENTATION_LANDSCAPE = "h"
ORIENTATION_PORTRAIT = "v"


def image_uri(item_id: str) -> str:
    """Proxy URI through which the client loads an image."""
    return f"{IMAGE_PROXY_PATH}?id={quote(item_id, safe='')}"


def orientation(item: DriveItem) -> str:
    return ORIENTATION_LANDSCAPE if item.is_landscape else ORIENTATION_PORTRAIT


def relative_time(moment: datetime, now: datetime) -> str:
    """Describe how long ago ``moment`` was, e.g. ``"3 hours ago"``.

    Minutes under an hour, hours under a day, days otherwise. Moments in the
    future read as ``"0 minutes ago"``.
    """
    minutes = max(int((now - moment).total_seconds() // 60), 0)
    hours = minutes // 60
    days = hours // 24
    if minutes < 60:
        return f"{minutes} {'minute' if minutes == 1 else 'minutes'} ago"
    if hours < 24:
        return f"{hours} {'hour' if hours == 1 else 'hours'} ago"
    return f"{days} {'day' if days == 1 else 'days'} ago"


def format_day(day: date) -> str:
    """Render a date as ``D/M/YYYY``."""
    return f"{day.day}/{day.month}/{day.year}"


def group_into_posts(
    images: list[DriveItem],
    profile: Profile,
    *,
    tz: tzinfo = UTC,
    now: datetime | None = None,
    rng: random.Random | None = None,
    description_template: str = DEFAULT_DESCRIPTION_TEMPLATE,
) -> list[Post]:
    """Bucket images by calendar day and orientation, one post per bucket.

    Images keep their input order inside a post and buckets are created in
    first-seen order. The resulting posts are ordered by descending day;
    posts of the same day keep their first-seen order. Images without any
    usable timestamp are left out.

    Args:
        images: Images, normally already sorted newest first.
        profile: Supplies the author and "liked by" fields.
        tz: Time zone in which calendar days are taken.
        now: Reference time for ``time_ago`` (defaults to the current time).
        rng: Source of the decorative like counts.
        description_template: Caption; ``{date}`` is replaced by the post's day.

    Returns:
        Posts ordered newest day first.
    """
    now = now or datetime.now(tz=UTC)
    rng = rng or random.Random()

    groups: dict[str, list[tuple[DriveItem, datetime]]] = {}
    skipped = 0
    for item in images:
        moment = group_timestamp(item)
        if moment is None:
            skipped += 1
            continue
        day = moment.astimezone(tz).date()
        key = f"{day.isoformat()}-{orientation(item)}"
        groups.setdefault(key, []).append((item, moment))

    if skipped:
        logger.info("[group_into_posts] images without timestamp left out; count:%d", skipped)

    posts: list[Post] = []
    for key, members in groups.items():
        first_moment = members[0][1]
        posts.append(
            Post(
                id=key,
                username=profile.current_user.username,
                user_avatar=profile.current_user.avatar,
                images=[image_uri(item.id) for item, _ in members],
                likes=rng.randrange(MIN_LIKES, MAX_LIKES),
                liked_by=profile.liked_by,
                description=description_template.format(
                    date=format_day(first_moment.astimezone(tz).date())
                ),
                time_ago=relative_time(first_moment, now),
            )
        )

    posts.sort(key=lambda post: date.fromisoformat(post.day), reverse=True)
    logger.info(
        "[group_into_posts] grouping complete; image_count:%d;post_count:%d",
        len(images),
        len(posts),
    )
    return posts
