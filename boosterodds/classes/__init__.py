"""
Booster Odds Class Dispatcher
"""

from .boosterodds_card import BoosteroddsCardObject
from .boosterodds_prices import BoosteroddsPricesObject
from .boosterodds_set_stats import BoosteroddsSetStatsObject
from .json_object import JsonObject
