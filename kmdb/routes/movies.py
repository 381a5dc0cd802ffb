from flask import Blueprint, request

from kmdb.errors import ValidationFailed
from kmdb.routes.params import force_arg, int_arg, json_body, page_args, page_envelope
from kmdb.schemas.actor import actor_dtos_schema
from kmdb.schemas.movie import movie_schema, movie_dto_schema, movie_dtos_schema, movie_patch_schema
from kmdb.services.movies import MovieService

# Blueprint gets inserted into flask app
movies_router = Blueprint('movies', __name__, url_prefix='/movies')

movie_service = MovieService()

DEFAULT_PAGE_SIZE = 100

def movie_to_hateoas(movie):
    return {
        **movie_schema.dump(movie),
        "_links": {
            "self": f"/api/movies/{movie.id}",
            "actors": f"/api/movies/{movie.id}/actors",
            "update": f"/api/movies/{movie.id}",
            "delete": f"/api/movies/{movie.id}",
        }
    }

@movies_router.get("")
def read_movies():
    # Filtering, one filter per request
    genre_id = int_arg("genre")
    if genre_id is not None:
        return movie_dtos_schema.dump(movie_service.get_movies_by_genre(genre_id))

    year = int_arg("year")
    if year is not None:
        return movie_dtos_schema.dump(movie_service.get_movies_by_release_year(year))

    actor_id = int_arg("actor")
    if actor_id is not None:
        return movie_dtos_schema.dump(movie_service.get_movies_by_actor(actor_id))

    # Pagination
    page, size = page_args(DEFAULT_PAGE_SIZE)
    movies = movie_service.list_movies(page, size)
    return page_envelope("/api/movies", movies, movie_dtos_schema.dump(movies.items))

@movies_router.get("/search")
def search_movies():
    title = request.args.get("title")
    if title is None:
        raise ValidationFailed("Required parameter 'title' is missing")
    return movie_dtos_schema.dump(movie_service.search_movies_by_title(title))

@movies_router.get("/<int:movie_id>")
def read_movie(movie_id):
    return movie_to_hateoas(movie_service.get_movie(movie_id))

@movies_router.get("/<int:movie_id>/actors")
def read_movie_actors(movie_id):
    return actor_dtos_schema.dump(movie_service.get_actors_by_movie(movie_id)), 200

@movies_router.post("")
def create_movie():
    dto = movie_dto_schema.load(json_body())
    movie = movie_service.create_movie(dto)
    return movie_to_hateoas(movie), 201

@movies_router.patch("/<int:movie_id>")
def partial_update_movie(movie_id):
    dto = movie_patch_schema.load(json_body())
    movie = movie_service.update_movie(movie_id, dto)
    return movie_to_hateoas(movie), 200

@movies_router.delete("/<int:movie_id>")
def delete_movie(movie_id):
    movie_service.get_movie(movie_id)  # 404 before the force flag is read
    movie_service.delete_movie(movie_id, force=force_arg())
    return "", 204
