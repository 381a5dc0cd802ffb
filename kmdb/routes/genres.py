from flask import Blueprint, request

from kmdb.routes.params import force_arg, json_body, page_args, page_envelope
from kmdb.schemas.genre import genre_dto_schema, genre_dtos_schema
from kmdb.services.genres import GenreService

genres_router = Blueprint("genres", __name__, url_prefix="/genres")

genre_service = GenreService()

DEFAULT_PAGE_SIZE = 10

def genre_to_hateoas(genre):
    return {
        **genre_dto_schema.dump(genre),
        "_links": {
            "self": f"/api/genres/{genre.id}",
            "update": f"/api/genres/{genre.id}",
            "delete": f"/api/genres/{genre.id}",
            "movies": f"/api/movies?genre={genre.id}"
        }
    }

@genres_router.get("")
def read_genres():
    name = request.args.get("name")
    if name is not None:
        return genre_dtos_schema.dump(genre_service.find_genres_by_name(name))

    page, size = page_args(DEFAULT_PAGE_SIZE)
    genres = genre_service.list_genres(page, size)
    return page_envelope("/api/genres", genres, [genre_to_hateoas(g) for g in genres.items])

@genres_router.get("/<int:genre_id>")
def read_genre(genre_id):
    return genre_to_hateoas(genre_service.get_genre(genre_id))

@genres_router.post("")
def create_genre():
    dto = genre_dto_schema.load(json_body())
    return genre_to_hateoas(genre_service.create_genre(dto)), 201

@genres_router.patch("/<int:genre_id>")
def update_genre(genre_id):
    dto = genre_dto_schema.load(json_body())
    return genre_to_hateoas(genre_service.update_genre(genre_id, dto)), 200

@genres_router.delete("/<int:genre_id>")
def delete_genre(genre_id):
    genre_service.get_genre(genre_id)
    genre_service.delete_genre(genre_id, force=force_arg())
    return "", 204
