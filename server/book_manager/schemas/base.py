from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON 字段使用 camelCase，Python 侧保持 snake_case"""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}
