from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from ..assemblers.prompt_assembler import format_number
from .result import Err, Ok, Result, ValidationError

# 범위 제약이 있는 숫자 필드 (between 메시지용)
RANGES = {
    "temp": (-50, 60),
    "humidity": (0, 100),
}


def _message(field: str, err: dict) -> str:
    kind = err["type"]
    ctx = err.get("ctx") or {}

    if kind == "missing" or kind == "string_too_short":
        return f"The {field} field is required."
    if kind == "string_type":
        return f"The {field} field must be a string."
    if kind == "string_too_long":
        return f"The {field} field must not be greater than {ctx.get('max_length')} characters."
    if kind in ("float_type", "float_parsing", "finite_number", "number_type"):
        return f"The {field} field must be a number."
    if kind in ("greater_than_equal", "less_than_equal"):
        if field in RANGES:
            low, high = RANGES[field]
            return f"The {field} field must be between {low} and {high}."
        if kind == "greater_than_equal":
            return f"The {field} field must be at least {format_number(ctx.get('ge'))}."
        return f"The {field} field must not be greater than {format_number(ctx.get('le'))}."
    if kind == "string_pattern_mismatch":
        return f"The {field} field must be a valid {field}."
    return err["msg"]


def field_errors(exc: SchemaError) -> dict[str, list[str]]:
    """
    pydantic 에러 -> {필드명: [메시지, ...]}
    필드명은 요청 JSON의 키(alias) 그대로 쓴다.
    """
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        errors.setdefault(field, []).append(_message(field, err))
    return errors


def validate_payload(model: type[BaseModel], payload) -> Result:
    """
    요청 바디를 모델로 검증. Ok(model) 또는 Err(ValidationError)
    """
    if not isinstance(payload, dict):
        return Err(ValidationError({"body": ["The request body must be a JSON object."]}))

    try:
        return Ok(model.model_validate(payload))
    except SchemaError as e:
        return Err(ValidationError(field_errors(e)))
