import logging
from datetime import date

from kmdb.dto import ActorDTO
from kmdb.errors import DuplicateResource, NotFound, ValidationFailed
from kmdb.models.actor import Actor
from kmdb.repositories import ActorRepository, MovieRepository
from kmdb.schemas.fields import is_blank
from kmdb.services import transactional
from kmdb.services.pagination import paginate

logger = logging.getLogger(__name__)


def map_actor_to_dto(actor):
    return ActorDTO(id=actor.id, name=actor.name, birth_date=date.fromisoformat(actor.birth_date))


def map_actor_to_entity(dto):
    return Actor(id=dto.id, name=dto.name, birth_date=dto.birth_date.isoformat())


class ActorService:
    def __init__(self, actors=None, movies=None):
        self.actors = actors or ActorRepository()
        self.movies = movies or MovieRepository()

    @transactional(read_only=True)
    def list_actors(self, page, size):
        return paginate(self.actors, page, size, map_actor_to_dto)

    @transactional(read_only=True)
    def get_actor(self, actor_id):
        return map_actor_to_dto(self._find_actor(actor_id))

    @transactional(read_only=True)
    def search_actors_by_name(self, name):
        logger.debug("Searching for actors with name containing '%s'", name)
        return [map_actor_to_dto(actor) for actor in self.actors.find_by_name_containing(name)]

    @transactional
    def create_actor(self, dto):
        if is_blank(dto.name):
            raise ValidationFailed("The actor's name cannot be null or blank.")
        if dto.birth_date is None:
            raise ValidationFailed("The actor's birth date cannot be null.")

        if self.actors.find_by_name_and_birth_date(dto.name, dto.birth_date.isoformat()):
            raise DuplicateResource("An actor with the same name and birthdate already exists")

        actor = self.actors.save(map_actor_to_entity(dto))
        logger.info("Created actor %s '%s'", actor.id, actor.name)
        return map_actor_to_dto(actor)

    @transactional
    def update_actor(self, actor_id, dto):
        actor = self._find_actor(actor_id)

        if not is_blank(dto.name):
            actor.name = dto.name
        if dto.birth_date is not None:
            actor.birth_date = dto.birth_date.isoformat()

        actor = self.actors.save(actor)
        logger.info("Updated actor %s", actor.id)
        return map_actor_to_dto(actor)

    @transactional
    def delete_actor(self, actor_id, force=False):
        actor = self._find_actor(actor_id)
        movies = list(actor.movies)

        if movies and not force:
            logger.warning("Refusing to delete actor %s linked to %d movie(s)", actor_id, len(movies))
            raise DuplicateResource("Actor is associated with movies and cannot be deleted.")

        # Movie owns movie_actor, so the movie side is what clears the join rows
        for movie in movies:
            movie.actors.remove(actor)
            self.movies.save(movie)

        self.actors.delete(actor)
        logger.info("Deleted actor %s (force=%s)", actor_id, force)

    def _find_actor(self, actor_id):
        actor = self.actors.find_by_id(actor_id)
        if actor is None:
            raise NotFound(f"Actor not found with id: {actor_id}")
        return actor
