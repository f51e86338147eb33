"""Settings routes - API key management."""

from fastapi import APIRouter

from apps.settings.handlers import (
    delete_api_key,
    get_api_key,
    save_api_key,
    validate_api_key,
)
from apps.settings.handlers.get_api_key import ApiKeyStatusResponse

router = APIRouter(prefix="/settings", tags=["Settings"])

# GET /settings/api-key - Key status (masked)
router.get("/api-key", response_model=ApiKeyStatusResponse)(get_api_key)

# PUT /settings/api-key - Save key
router.put("/api-key")(save_api_key)

# DELETE /settings/api-key - Clear key
router.delete("/api-key")(delete_api_key)

# POST /settings/api-key/validate - Probe provider with a key
router.post("/api-key/validate")(validate_api_key)
