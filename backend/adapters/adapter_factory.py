# adapters/adapter_factory.py
from typing import Optional
from core.adapter_factory_registry import AdapterFactoryRegistry
from core.interfaces import TravelEstimator
from core.register_adapters import register_adapters
from models.solvers import AssignmentOptions


def create_adapter(name: str) -> TravelEstimator:
    register_adapters()  # idempotent
    return AdapterFactoryRegistry.get(name)


def create_estimator(options: Optional[AssignmentOptions] = None) -> TravelEstimator:
    """One estimator per batch: OSRM-backed when external routing is requested."""
    options = options or AssignmentOptions()
    return create_adapter("osrm" if options.use_external_routing else "haversine")
