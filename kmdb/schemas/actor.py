from marshmallow import fields, post_load, EXCLUDE

from kmdb.dto import ActorDTO
from kmdb.models.actor import Actor
from kmdb.schemas import ma
from kmdb.schemas.fields import IsoDate, not_blank, validate_past_or_present

# entity shape, nested inside a movie; birth_date is already an ISO string
class ActorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Actor

    id = fields.Int(dump_only=True)
    birth_date = fields.String(data_key="birthDate")

class ActorDTOSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    name = fields.String(
        required=True,
        validate=not_blank("Name can not be blank"),
        error_messages={"required": "Name can not be blank", "null": "Name can not be blank"},
    )
    birth_date = IsoDate(
        data_key="birthDate",
        required=True,
        validate=validate_past_or_present,
        error_messages={"required": "Birthdate can not be null", "null": "Birthdate can not be null"},
    )

    @post_load
    def make_dto(self, data, **kwargs):
        return ActorDTO(**data)

# PATCH body: blank or missing fields are left for the service to skip
class ActorPatchSchema(ActorDTOSchema):
    name = fields.String(allow_none=True)
    birth_date = IsoDate(data_key="birthDate", allow_none=True, validate=validate_past_or_present)


actor_dto_schema = ActorDTOSchema()
actor_dtos_schema = ActorDTOSchema(many=True)
actor_patch_schema = ActorPatchSchema()
