import copy
import itertools
import threading
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

Post = Dict[str, Any]

SEED_POSTS: List[Post] = [
    {
        "id": 1,
        "content": "Пост, относящийся к курсу React",
        "created": "2023-12-29T17:41:04.960316",
    },
    {
        "id": 2,
        "content": "Другой пост, относящийся к курсу по React",
        "created": "2023-12-29T17:41:04.960435",
    },
]


class PostRepository:
    def __init__(self, posts: Optional[Iterable[Post]] = None):
        """
        Initialize post repository.

        Args:
            posts: Initial posts, each with an integer "id". The id counter
                starts after the largest seeded id.
        """
        self._posts: List[Post] = [copy.deepcopy(dict(post)) for post in posts or []]
        start = max((post["id"] for post in self._posts), default=0) + 1
        self._ids = itertools.count(start)
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "PostRepository":
        return cls(SEED_POSTS)

    def list(self) -> List[Post]:
        """Return copies of all posts in storage order."""
        with self._lock:
            return [copy.deepcopy(post) for post in self._posts]

    def get(self, post_id: int) -> Optional[Post]:
        with self._lock:
            for post in self._posts:
                if post["id"] == post_id:
                    return copy.deepcopy(post)
        return None

    def create(self, fields: Optional[Dict[str, Any]] = None) -> Post:
        """
        Append a new post.

        Args:
            fields: Client-supplied fields; "id" and "created" are overridden

        Returns:
            Copy of the stored post

        Logic:
        1. Take the next id from the counter (ids are never reused)
        2. Stamp the creation time
        3. Append to the end of the list
        """
        with self._lock:
            post = copy.deepcopy(dict(fields or {}))
            post["id"] = next(self._ids)
            post["created"] = datetime.now().isoformat()
            self._posts.append(post)
            return copy.deepcopy(post)

    def replace(self, post_id: int, fields: Dict[str, Any]) -> bool:
        """
        Merge fields over an existing post, keeping its id.

        Returns:
            True if a post was updated, False if none has that id
        """
        with self._lock:
            for index, post in enumerate(self._posts):
                if post["id"] == post_id:
                    updated = {**post, **copy.deepcopy(dict(fields)), "id": post["id"]}
                    self._posts[index] = updated
                    return True
        return False

    def delete(self, post_id: int) -> bool:
        """
        Remove the first post with the given id.

        Returns:
            True if a post was removed
        """
        with self._lock:
            for index, post in enumerate(self._posts):
                if post["id"] == post_id:
                    del self._posts[index]
                    return True
        return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)
