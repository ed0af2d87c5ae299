"""retirecast: Monte Carlo retirement-portfolio projection engine."""

__version__ = "0.2.0"

from retirecast.analytics.metrics import MonteCarloSummary as MonteCarloSummary
from retirecast.analytics.metrics import percentile_value as percentile_value
from retirecast.config.defaults import default_params as default_params
from retirecast.config.defaults import default_sim_config as default_sim_config
from retirecast.config.schema import ReturnAssumption as ReturnAssumption
from retirecast.config.schema import ReturnAssumptions as ReturnAssumptions
from retirecast.config.schema import SimulationConfig as SimulationConfig
from retirecast.config.schema import SimulationParameters as SimulationParameters
from retirecast.core.engine import SinglePathResult as SinglePathResult
from retirecast.core.engine import simulate_path as simulate_path
from retirecast.core.monte_carlo import run_monte_carlo as run_monte_carlo
from retirecast.core.rng import make_rng as make_rng
from retirecast.utils.exceptions import SimulationCancelled as SimulationCancelled
