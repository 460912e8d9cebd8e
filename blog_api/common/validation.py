from blog_api.common.result import FieldError


def field_errors_from_messages(messages) -> list[FieldError]:
    """Flatten marshmallow error messages, keeping the first message per field."""
    if isinstance(messages, list):
        return [FieldError(None, str(messages[0]))] if messages else []

    errors = []
    for field_name, field_messages in messages.items():
        if isinstance(field_messages, dict):
            nested = field_errors_from_messages(field_messages)
            message = nested[0].message if nested else "Invalid value"
        elif isinstance(field_messages, list) and field_messages:
            message = str(field_messages[0])
        else:
            message = str(field_messages)
        field = None if field_name == "_schema" else field_name
        errors.append(FieldError(field, message))
    return errors
