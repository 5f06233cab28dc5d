# ai.py
from pydantic import BaseModel


class ProcessEmailRequest(BaseModel):
    # Blank content is rejected by the extractor itself (400), not by schema validation.
    email_content: str
