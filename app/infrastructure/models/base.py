"""Base Pydantic model configuration for request payloads."""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Base model for API payloads.

    Provides standard Pydantic configuration for:
    - camelCase wire aliases alongside snake_case field names
    - Validation on assignment
    - Whitespace stripping of identifiers
    """

    model_config = ConfigDict(
        use_enum_values=False,
        populate_by_name=True,
        validate_assignment=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
