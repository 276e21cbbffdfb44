from pydantic import BaseModel, ConfigDict


class Doc(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str  # document name as listed in the docs file
    tokens: list[str] = []  # raw whitespace-delimited tokens, in document order
