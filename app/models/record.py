from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    id: str = Field(..., min_length=1)
    name: str
    year: int = Field(..., ge=0, le=65535)
    # "was_good" is the field name older clients send
    flag: bool = Field(..., validation_alias=AliasChoices("flag", "was_good"))
