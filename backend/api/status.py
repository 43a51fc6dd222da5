# api/status.py
from fastapi import APIRouter

from config import settings
from core.adapter_factory_registry import AdapterFactoryRegistry
from services.solver_factory import list_solvers

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/adapters")
def adapters():
    return {
        "adapters": AdapterFactoryRegistry.list_adapters(),
        "default": "haversine",
        "average_speed_kmh": settings.AVERAGE_SPEED_KMH,
        "osrm": {"base_url": settings.OSRM_BASE_URL, "profile": settings.OSRM_PROFILE},
    }


@router.get("/strategies")
def strategies():
    # what "auto" races and under which per-candidate budget
    return {
        "strategies": list_solvers(),
        "auto": {
            "candidates": list(settings.AUTO_CANDIDATES),
            "budget_s": settings.AUTO_CANDIDATE_BUDGET_S,
            "parallel": settings.AUTO_PARALLEL,
        },
    }
