# Role: Error taxonomy shared by the validator, the pricing engine and the currency converter.
# The API layer maps each class to a status code; nothing here knows about HTTP.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


class PricingError(Exception):
    """Base class for every error raised by the quotation core."""


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class RequestValidationFailed(PricingError):
    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors) or "request"
        super().__init__(f"Invalid calculation request: {fields}")

    def to_dict(self) -> dict:
        return {
            "message": str(self),
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
        }


class NotFoundError(PricingError):
    def __init__(self, entity: str, entity_id: Optional[int]) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} {entity_id} not found")


class ComputationError(PricingError):
    """A cost came out negative or non-finite. Indicates a defect, never a user error."""


class UnsupportedCurrencyError(PricingError, ValueError):
    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unsupported currency: {code}")
