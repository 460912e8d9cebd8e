from marshmallow import validate

from blog_api.schemas.base_schema import InputSchema, TrimmedStr


class CommentInputSchema(InputSchema):
    content = TrimmedStr(
        required=True,
        validate=validate.Length(
            min=20, max=300,
            error="Content must be between 20 and 300 characters long",
        ),
    )
