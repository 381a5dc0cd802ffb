from marshmallow import fields, post_load, EXCLUDE

from kmdb.dto import GenreDTO
from kmdb.models.genre import Genre
from kmdb.schemas import ma
from kmdb.schemas.fields import not_blank

# entity shape, nested inside a movie
class GenreSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Genre

    id = fields.Int(dump_only=True)

class GenreDTOSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    name = fields.String(
        required=True,
        validate=not_blank("Name can not be blank"),
        error_messages={"required": "Name can not be null", "null": "Name can not be null"},
    )

    @post_load
    def make_dto(self, data, **kwargs):
        return GenreDTO(**data)


genre_dto_schema = GenreDTOSchema()
genre_dtos_schema = GenreDTOSchema(many=True)
