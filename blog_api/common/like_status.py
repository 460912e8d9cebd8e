from enum import Enum


class LikeStatus(str, Enum):
    LIKE = "Like"
    DISLIKE = "Dislike"
    NONE = "None"
