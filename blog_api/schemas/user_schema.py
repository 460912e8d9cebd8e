from marshmallow import validate

from blog_api.schemas.base_schema import InputSchema, TrimmedStr

LOGIN_PATTERN = r"^[a-zA-Z0-9_-]*$"
EMAIL_PATTERN = r"^[\w\-.]+@([\w-]+\.)+[\w-]{2,4}$"


class UserInputSchema(InputSchema):
    login = TrimmedStr(
        required=True,
        validate=[
            validate.Length(min=3, max=10, error="Login length must be between 3 and 10 symbols"),
            validate.Regexp(LOGIN_PATTERN, error="Login must match the following pattern: {regex}"),
        ],
    )
    password = TrimmedStr(
        required=True,
        validate=validate.Length(min=6, max=20, error="Password length must be between 6 and 20 symbols"),
    )
    email = TrimmedStr(
        required=True,
        validate=validate.Regexp(EMAIL_PATTERN, error="Email must match the following pattern: {regex}"),
    )


class LoginInputSchema(InputSchema):
    loginOrEmail = TrimmedStr(
        required=True,
        validate=validate.Length(min=1, error="Login or email must not be empty"),
    )
    password = TrimmedStr(
        required=True,
        validate=validate.Length(min=1, error="Password must not be empty"),
    )
