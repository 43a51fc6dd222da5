# core/load_plugins.py
import logging

logger = logging.getLogger(__name__)


def load_plugins():
    # Estimator adapters
    from core.register_adapters import register_adapters

    register_adapters()

    # Strategies
    from services.solver_factory import register_solvers, list_solvers

    register_solvers()

    from core.adapter_factory_registry import AdapterFactoryRegistry

    logger.info(
        f"plugins loaded: adapters={AdapterFactoryRegistry.list_adapters()} "
        f"strategies={list_solvers()}"
    )
