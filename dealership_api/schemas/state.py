"""State and city Pydantic schemas (request DTOs and response models)."""


from dealership_api.schemas.common import CamelModel, PayloadModel

class StatePayload(PayloadModel):
    name: str

class StateOut(CamelModel):
    id: int
    name: str

class CityPayload(PayloadModel):
    city_number: int
    state_id: int
    name: str

class CityOut(CamelModel):
    city_number: int
    state_id: int
    name: str
