from marshmallow import EXCLUDE, fields

from blog_api.extensions.extensions import ma


class TrimmedStr(fields.String):
    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).strip()


class InputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE
