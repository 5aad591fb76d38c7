from pydantic import BaseModel, Field, ConfigDict


class Payload(BaseModel):
    age: int = 0
    state: str = ""
    panics_on_when: bool = False
    panics_on_then: bool = False

    age_check: bool = False
    state_check: bool = False

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "age": 25,
                "state": "CA",
                "panics_on_when": False,
                "panics_on_then": False,
                "age_check": False,
                "state_check": False,
            }
        },
    )


class ExecutionResponse(BaseModel):
    payload: Payload
    cycles: int = Field(..., description="Number of rule actions fired")
    fired: list[str] = Field(default_factory=list)
