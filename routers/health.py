from fastapi import APIRouter, Depends

from presets.registry import PresetRegistry, get_registry
from schemas import HealthResponse

router = APIRouter()

VERSION = "0.1.0"


def check_storage(registry: PresetRegistry) -> dict[str, bool]:
    """Check the preset storage backend is reachable."""
    storage = registry.storage
    try:
        reachable = storage.ping()
    except Exception:
        reachable = False
    return {f"storage:{storage.backend}": reachable}


@router.get("/health", response_model=HealthResponse)
def health(registry: PresetRegistry = Depends(get_registry)):
    checks = check_storage(registry)
    all_available = all(checks.values())
    return HealthResponse(
        status="ok" if all_available else "degraded",
        checks=checks,
        version=VERSION,
    )
