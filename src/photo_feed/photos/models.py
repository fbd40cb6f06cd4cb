"""Data models for feed posts and the static user profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Post:
    """A synthetic feed entry: the images of one calendar day and orientation.

    Attributes:
        id: ``"{YYYY-MM-DD}-{h|v}"``.
        username: Author shown on the post (the profile's current user).
        user_avatar: Avatar URL of the author.
        images: Proxy URIs (``/api/image?id=...``) in feed order.
        likes: Decorative like counter.
        liked_by: Username shown in the "liked by" line.
        description: Caption embedding the post's date.
        time_ago: Relative age of the post's first image.
    """

    id: str
    username: str
    user_avatar: str
    images: list[str] = field(default_factory=list)
    likes: int = 0
    liked_by: str = ""
    description: str = ""
    time_ago: str = ""

    @property
    def day(self) -> str:
        """The ``YYYY-MM-DD`` portion of the id."""
        return self.id.rsplit("-", 1)[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "userAvatar": self.user_avatar,
            "images": list(self.images),
            "likes": self.likes,
            "likedBy": self.liked_by,
            "description": self.description,
            "timeAgo": self.time_ago,
        }


@dataclass
class Feed:
    """Posts plus the number of images that passed the filter."""

    posts: list[Post] = field(default_factory=list)
    total_photos: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "posts": [post.to_dict() for post in self.posts],
            "totalPhotos": self.total_photos,
        }


@dataclass
class CurrentUser:
    username: str
    full_name: str
    avatar: str


@dataclass
class SuggestedUser:
    username: str
    avatar: str
    followed_by: str = ""


@dataclass
class Profile:
    """Static account data used to dress up posts and fill the sidebar."""

    current_user: CurrentUser
    suggested_users: list[SuggestedUser] = field(default_factory=list)

    @property
    def liked_by(self) -> str:
        """Username of the first suggested user, or ``"unknown"``."""
        if self.suggested_users:
            return self.suggested_users[0].username
        return "unknown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentUser": {
                "username": self.current_user.username,
                "fullName": self.current_user.full_name,
                "avatar": self.current_user.avatar,
            },
            "suggestedUsers": [
                {"username": u.username, "avatar": u.avatar, "followedBy": u.followed_by}
                for u in self.suggested_users
            ],
        }
