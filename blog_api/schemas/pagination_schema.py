from flask import current_app
from marshmallow import validate

from blog_api.common.pagination import SORT_DESC
from blog_api.extensions.extensions import ma
from blog_api.schemas.base_schema import InputSchema


class PageQuerySchema(InputSchema):
    pageNumber = ma.Int(
        load_default=1,
        validate=validate.Range(min=1, error="Page number must be a positive integer"),
    )
    pageSize = ma.Int(
        load_default=lambda: current_app.config["DEFAULT_PAGE_SIZE"],
        validate=validate.Range(min=1, error="Page size must be a positive integer"),
    )
    sortBy = ma.Str(load_default="createdAt")
    # anything but "asc" sorts descending
    sortDirection = ma.Str(load_default=SORT_DESC)


class BlogsQuerySchema(PageQuerySchema):
    searchNameTerm = ma.Str(load_default=None)


class UsersQuerySchema(PageQuerySchema):
    searchLoginTerm = ma.Str(load_default=None)
    searchEmailTerm = ma.Str(load_default=None)
