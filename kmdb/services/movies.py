import logging

from marshmallow import missing

from kmdb.dto import MovieDTO
from kmdb.errors import DuplicateResource, NotFound, ValidationFailed
from kmdb.models.movie import Movie
from kmdb.repositories import ActorRepository, GenreRepository, MovieRepository
from kmdb.services import transactional
from kmdb.services.actors import map_actor_to_dto
from kmdb.services.pagination import paginate

logger = logging.getLogger(__name__)


class MovieService:
    """Movies and their actor/genre associations.

    Movie is the owning side of both many-to-many associations. Actor.movies
    and Genre.movies follow from it through the ORM.
    """

    def __init__(self, movies=None, actors=None, genres=None):
        self.movies = movies or MovieRepository()
        self.actors = actors or ActorRepository()
        self.genres = genres or GenreRepository()

    @transactional
    def create_movie(self, dto):
        # approximate duplicate: an existing title containing the new one, same year and duration
        for existing in self.movies.find_by_title_containing(dto.title):
            if existing.release_year == dto.release_year and existing.duration == dto.duration:
                raise DuplicateResource("Movie already exists with the same details.")

        movie = self.movies.save(self.map_to_entity(dto))
        logger.info("Created movie %s '%s'", movie.id, movie.title)
        return movie

    @transactional(read_only=True)
    def get_movie(self, movie_id):
        return self._find_movie(movie_id)

    @transactional(read_only=True)
    def list_movies(self, page, size):
        return paginate(self.movies, page, size, self.map_to_dto)

    @transactional(read_only=True)
    def get_movies_by_genre(self, genre_id):
        genre = self.genres.find_by_id(genre_id)
        if genre is None:
            raise NotFound("Genre not found")
        return [self.map_to_dto(movie) for movie in genre.movies]

    @transactional(read_only=True)
    def get_movies_by_release_year(self, release_year):
        return [self.map_to_dto(movie) for movie in self.movies.find_by_release_year(release_year)]

    @transactional(read_only=True)
    def get_movies_by_actor(self, actor_id):
        actor = self.actors.find_by_id(actor_id)
        if actor is None:
            raise NotFound(f"Actor not found with id: {actor_id}")
        return [self.map_to_dto(movie) for movie in actor.movies]

    @transactional(read_only=True)
    def get_actors_by_movie(self, movie_id):
        movie = self._find_movie(movie_id)
        return [map_actor_to_dto(actor) for actor in movie.actors]

    @transactional(read_only=True)
    def search_movies_by_title(self, title):
        logger.debug("Searching for movies with title containing '%s'", title)
        return [self.map_to_dto(movie) for movie in self.movies.find_by_title_containing(title)]

    @transactional
    def update_movie(self, movie_id, dto):
        movie = self._find_movie(movie_id)
        if dto is None:
            raise ValidationFailed("Movie details cannot be null")
        logger.debug("Updating movie %s with %s", movie_id, dto)

        # only fields present in the request overwrite the stored ones
        if dto.title is not None:
            movie.title = dto.title
        if dto.release_year is not None:
            movie.release_year = dto.release_year
        if dto.duration is not None:
            movie.duration = dto.duration

        # None leaves associations untouched, [] clears them
        if dto.actor_ids is not None:
            movie.actors = self.actors.find_all_by_ids(dto.actor_ids)
        if dto.genre_ids is not None:
            movie.genres = self.genres.find_all_by_ids(dto.genre_ids)

        if movie.title is None or movie.release_year is None or movie.duration is None:
            raise ValidationFailed("Movie fields cannot be null before saving.")

        movie = self.movies.save(movie)
        logger.info("Updated movie %s", movie.id)
        return movie

    @transactional
    def delete_movie(self, movie_id, force=False):
        movie = self._find_movie(movie_id)
        actors = list(movie.actors)
        genres = list(movie.genres)

        if not force and (actors or genres):
            logger.warning("Refusing to delete movie %s with live associations", movie_id)
            raise DuplicateResource(
                f"Oops, you cannot delete '{movie.title}' because it is associated with "
                f"{len(actors)} actor(s) and {len(genres)} genre(s)."
            )

        # unwind from the inverse side before the row goes
        for actor in actors:
            actor.movies.remove(movie)
            self.actors.save(actor)
        for genre in genres:
            genre.movies.remove(movie)
            self.genres.save(genre)

        self.movies.delete(movie)
        logger.info("Deleted movie %s (force=%s)", movie_id, force)

    def map_to_dto(self, movie):
        dto = MovieDTO(
            id=movie.id,
            title=movie.title,
            release_year=movie.release_year,
            duration=movie.duration,
        )
        if movie.actors:
            dto.actors = [actor.name for actor in movie.actors]
            dto.actor_ids = [actor.id for actor in movie.actors]
        else:
            dto.actors = missing
            dto.actor_ids = None
        if movie.genres:
            dto.genres = [genre.name for genre in movie.genres]
            dto.genre_ids = [genre.id for genre in movie.genres]
        else:
            dto.genres = missing
            dto.genre_ids = None
        return dto

    def map_to_entity(self, dto):
        # resolve both lists before building, so no flush sees a half-built movie
        actors = self.actors.find_all_by_ids(dto.actor_ids or [])
        genres = self.genres.find_all_by_ids(dto.genre_ids or [])
        return Movie(
            id=dto.id,
            title=dto.title,
            release_year=dto.release_year,
            duration=dto.duration,
            actors=actors,
            genres=genres,
        )

    def _find_movie(self, movie_id):
        movie = self.movies.find_by_id(movie_id)
        if movie is None:
            raise NotFound("Movie not found")
        return movie
