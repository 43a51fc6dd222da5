# core/register_adapters.py
from __future__ import annotations

from core.adapter_factory_registry import AdapterFactoryRegistry

from adapters.offline.haversine_adapter import HaversineAdapter
from adapters.online.osrm_adapter import OSRMRouteAdapter

_registered = False


def _safe_register(name: str, factory) -> None:
    """Idempotent: a second registration of the same name is ignored."""
    if not AdapterFactoryRegistry.is_registered(name):
        AdapterFactoryRegistry.register(name, factory)


def register_adapters() -> None:
    global _registered
    if _registered:
        return

    # Offline (default)
    _safe_register("haversine", lambda: HaversineAdapter())

    # Online; each instance carries its own batch-scoped cache
    _safe_register("osrm", lambda: OSRMRouteAdapter())

    _registered = True
