from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


class City(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
    )

    name: str = Field(..., min_length=1, description="Display name of the city.")

    @classmethod
    def create(cls, name: str | None) -> "City":
        """
        Create a City, rejecting missing or empty names.

        The name is kept verbatim; no whitespace trimming is applied.

        Raises:
            ValidationError: if name is None or an empty string
        """
        try:
            return cls(name=name)  # type: ignore[arg-type]
        except PydanticValidationError as e:
            raise ValidationError(
                "name", "The city name cannot be null or empty."
            ) from e

    def __str__(self) -> str:
        return self.name
