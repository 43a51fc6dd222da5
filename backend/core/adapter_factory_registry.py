# core/adapter_factory_registry.py
from typing import Callable, Dict
from core.exceptions import NotRegistered
from core.interfaces import TravelEstimator


class AdapterFactoryRegistry:
    _factories: Dict[str, Callable[[], TravelEstimator]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[[], TravelEstimator]) -> None:
        key = name.lower().strip()
        if key in cls._factories:
            raise ValueError(f"Adapter '{name}' is already registered.")
        cls._factories[key] = factory

    @classmethod
    def get(cls, name: str) -> TravelEstimator:
        key = name.lower().strip()
        if key not in cls._factories:
            raise NotRegistered(f"Adapter '{name}' is not registered.")
        return cls._factories[key]()  # create instance

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower().strip() in cls._factories

    @classmethod
    def list_adapters(cls) -> list[str]:
        return sorted(cls._factories.keys())
