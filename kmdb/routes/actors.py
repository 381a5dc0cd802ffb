from flask import Blueprint, request

from kmdb.routes.params import force_arg, json_body, page_args, page_envelope
from kmdb.schemas.actor import actor_dto_schema, actor_dtos_schema, actor_patch_schema
from kmdb.services.actors import ActorService

# Blueprint gets inserted into flask app
actors_router = Blueprint('actors', __name__, url_prefix='/actors')

actor_service = ActorService()

DEFAULT_PAGE_SIZE = 100

def actor_to_hateoas(actor):
    return {
        **actor_dto_schema.dump(actor),
        "_links": {
            "self": f"/api/actors/{actor.id}",
            "update": f"/api/actors/{actor.id}",
            "delete": f"/api/actors/{actor.id}",
            "movies": f"/api/movies?actor={actor.id}"
        }
    }

@actors_router.get("")
def read_actors():
    name = request.args.get("name")
    if name is not None:
        return actor_dtos_schema.dump(actor_service.search_actors_by_name(name))

    page, size = page_args(DEFAULT_PAGE_SIZE)
    actors = actor_service.list_actors(page, size)
    return page_envelope("/api/actors", actors, [actor_to_hateoas(a) for a in actors.items])

@actors_router.get("/<int:actor_id>")
def read_actor(actor_id):
    return actor_to_hateoas(actor_service.get_actor(actor_id))

@actors_router.post("")
def create_actor():
    dto = actor_dto_schema.load(json_body())  # validate body against schema
    actor = actor_service.create_actor(dto)
    return actor_to_hateoas(actor), 201

@actors_router.patch("/<int:actor_id>")
def partial_update_actor(actor_id):
    dto = actor_patch_schema.load(json_body())
    actor = actor_service.update_actor(actor_id, dto)
    return actor_to_hateoas(actor), 200

@actors_router.delete("/<int:actor_id>")
def delete_actor(actor_id):
    actor_service.get_actor(actor_id)
    actor_service.delete_actor(actor_id, force=force_arg())
    return "", 204
