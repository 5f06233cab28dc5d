# clients.py
from pydantic import BaseModel, ConfigDict


class ClientRead(BaseModel):
    id: int
    name: str
    company: str

    model_config = ConfigDict(from_attributes=True)
