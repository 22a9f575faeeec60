from .logger import setup_logging
from .money import round2, to_money

__all__ = ["setup_logging", "round2", "to_money"]
