# Role: Shared pydantic base. Python code uses snake_case; the JSON wire format (requests, results,
# catalog snapshots) uses camelCase, so every model accepts both and dumps camelCase by default.

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
