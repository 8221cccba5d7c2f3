from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base for mutable domain aggregates.

    Assignments are re-validated so an aggregate can never hold a value its
    field constraints reject.
    """

    model_config = ConfigDict(validate_assignment=True)
