from marshmallow import validate

from blog_api.schemas.base_schema import InputSchema, TrimmedStr

WEBSITE_URL_PATTERN = r"^https://([a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(/[a-zA-Z0-9_-]+)*/?$"


class BlogInputSchema(InputSchema):
    name = TrimmedStr(
        required=True,
        validate=validate.Length(min=1, max=15, error="Name length must be between 1 and 15 symbols"),
    )
    description = TrimmedStr(
        required=True,
        validate=validate.Length(
            min=1, max=500, error="Description length must be between 1 and 500 symbols"
        ),
    )
    websiteUrl = TrimmedStr(
        required=True,
        validate=[
            validate.Length(min=1, max=100, error="Website url length must be between 1 and 100 symbols"),
            validate.Regexp(
                WEBSITE_URL_PATTERN,
                error="Website url must match the following pattern: {regex}",
            ),
        ],
    )
