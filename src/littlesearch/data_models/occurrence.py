from pydantic import BaseModel, ConfigDict, PositiveInt


class Occurrence(BaseModel):
    """One keyword's count within a single document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: PositiveInt

    def __str__(self) -> str:
        return f"({self.doc_id},{self.frequency})"
