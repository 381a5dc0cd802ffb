from marshmallow import fields, post_dump, post_load, validate, EXCLUDE

from kmdb.dto import MovieDTO
from kmdb.models.movie import Movie, MIN_RELEASE_YEAR, MAX_RELEASE_YEAR
from kmdb.schemas import ma
from kmdb.schemas.actor import ActorSchema
from kmdb.schemas.fields import database_integer, not_blank
from kmdb.schemas.genre import GenreSchema

MIN_DURATION = 60

release_year_range = [
    validate.Range(min=MIN_RELEASE_YEAR, error=f"Release year can not be earlier than {MIN_RELEASE_YEAR}"),
    validate.Range(max=MAX_RELEASE_YEAR, error=f"Release year can not be later than {MAX_RELEASE_YEAR}"),
]

# entity shape returned by create, fetch and update
class MovieSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Movie
        include_relationships = True

    id = fields.Int(dump_only=True)
    release_year = fields.Int(data_key="releaseYear")

    genres = fields.Nested(GenreSchema, many=True, dump_only=True)
    actors = fields.Nested(ActorSchema, many=True, dump_only=True)

class MovieDTOSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    title = fields.String(
        required=True,
        validate=not_blank("Title can not be blank"),
        error_messages={"required": "Title can not be null", "null": "Title can not be null"},
    )
    release_year = fields.Int(
        data_key="releaseYear",
        required=True,
        validate=release_year_range,
        error_messages={"required": "Release year can not be null", "null": "Release year can not be null"},
    )
    duration = fields.Int(
        required=True,
        validate=[
            validate.Range(min=MIN_DURATION, error=f"Duration must be at least {MIN_DURATION} minutes"),
            database_integer("Duration"),
        ],
        error_messages={"required": "Duration can not be null", "null": "Duration can not be null"},
    )

    actor_ids = fields.List(fields.Int(validate=database_integer("Actor id")), data_key="actorIds", allow_none=True)
    genre_ids = fields.List(fields.Int(validate=database_integer("Genre id")), data_key="genreIds", allow_none=True)

    # names are output only; absent when the movie has no associations
    actors = fields.List(fields.String(), dump_only=True)
    genres = fields.List(fields.String(), dump_only=True)

    @post_load
    def make_dto(self, data, **kwargs):
        return MovieDTO(**data)

    @post_dump
    def drop_nulls(self, data, **kwargs):
        return {key: value for key, value in data.items() if value is not None}

# PATCH body: every field optional, absent id lists mean "leave as is"
class MoviePatchSchema(MovieDTOSchema):
    title = fields.String(allow_none=True)
    release_year = fields.Int(data_key="releaseYear", allow_none=True)
    duration = fields.Int(allow_none=True, validate=database_integer("Duration"))

    @post_load
    def make_dto(self, data, **kwargs):
        data.setdefault("actor_ids", None)
        data.setdefault("genre_ids", None)
        return MovieDTO(**data)


movie_schema = MovieSchema()
movie_dto_schema = MovieDTOSchema()
movie_dtos_schema = MovieDTOSchema(many=True)
movie_patch_schema = MoviePatchSchema()
