# Role: Input gatekeeper for the calculator. Turns a raw JSON body into an immutable CalculationRequest,
# or raises RequestValidationFailed with one entry per offending field. The engine never sees bad input.

from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError

from tour_pricing.core.errors import FieldError, RequestValidationFailed
from tour_pricing.models.calculation import CalculationRequest


class Validator:
    def validate(self, payload: Any) -> CalculationRequest:
        if not isinstance(payload, dict):
            raise RequestValidationFailed([FieldError(field="body", message="Request body must be a JSON object")])

        try:
            return CalculationRequest.model_validate(payload)
        except ValidationError as e:
            raise RequestValidationFailed(self._field_errors(e)) from e

    def _field_errors(self, error: ValidationError) -> List[FieldError]:
        out: List[FieldError] = []
        for item in error.errors():
            loc = [str(p) for p in item.get("loc", ()) if p != "__root__"]
            if loc:
                loc[0] = self._wire_name(loc[0])
            field = ".".join(loc) or "body"
            msg = item.get("msg", "Invalid value")
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            out.append(FieldError(field=field, message=msg))
        return out

    def _wire_name(self, name: str) -> str:
        # Key line: a validated default (guideId) is reported under its Python name, not the alias.
        info = CalculationRequest.model_fields.get(name)
        if info is None:
            return name
        return info.alias or name
