from evaluation.protocols.simulation_protocol import SimulationResult
from evaluation.protocols.simulation_protocol import SimulationSession
from evaluation.protocols.simulation_protocol import reset_population
from evaluation.protocols.simulation_protocol import run_simulation

__all__ = [
    "SimulationResult",
    "SimulationSession",
    "reset_population",
    "run_simulation",
]
