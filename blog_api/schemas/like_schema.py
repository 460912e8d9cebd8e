from marshmallow import validate

from blog_api.common.like_status import LikeStatus
from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import InputSchema

LIKE_STATUS_VALUES = [status.value for status in LikeStatus]


class LikeInputSchema(InputSchema):
    likeStatus = ma.Str(
        required=True,
        validate=validate.OneOf(
            LIKE_STATUS_VALUES,
            error="Like status must be one of the following: " + ", ".join(LIKE_STATUS_VALUES),
        ),
    )
