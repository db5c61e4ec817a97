"""Quote validation endpoints."""

from fastapi import APIRouter

from treatments.application.config import load_config_from_dict, validate_config
from treatments.web.schemas.requests import ConfigValidateRequest
from treatments.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_quote(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a quote configuration without pricing it.

    Schema errors are answered with 422 by the ConfigError handler;
    advisory errors and warnings are reported in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
