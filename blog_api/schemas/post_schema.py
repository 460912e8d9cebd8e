from marshmallow import ValidationError, validate, validates

from blog_api.repositories import blog_repository
from blog_api.schemas.base_schema import InputSchema, TrimmedStr


class BlogPostInputSchema(InputSchema):
    """Post fields when the blog comes from the URL."""

    title = TrimmedStr(
        required=True,
        validate=validate.Length(min=1, max=30, error="Title length must be between 1 and 30 symbols"),
    )
    shortDescription = TrimmedStr(
        required=True,
        validate=validate.Length(
            min=1, max=100, error="Short description length must be between 1 and 100 symbols"
        ),
    )
    content = TrimmedStr(
        required=True,
        validate=validate.Length(min=1, max=1000, error="Content length must be between 1 and 1000 symbols"),
    )


class PostInputSchema(BlogPostInputSchema):
    blogId = TrimmedStr(required=True)

    @validates("blogId")
    def validate_blog_id(self, value, **kwargs):
        if not value.isdigit() or not blog_repository.find_blog_by_id(int(value)):
            raise ValidationError("Blog does not exist")
