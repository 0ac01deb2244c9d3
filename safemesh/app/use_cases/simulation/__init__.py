from .run_simulation_use_case import RunSimulationUseCase

__all__ = ["RunSimulationUseCase"]
