from enum import Enum


class ChargeType(str, Enum):
    MRC = "MRC"  # monthly recurring
    NRC = "NRC"  # one-time


class PricingMode(str, Enum):
    GOVERNED = "GOVERNED"            # category floor + commission coupling
    UNCONSTRAINED = "UNCONSTRAINED"  # privileged callers: sell at cost basis


class MarginBand(str, Enum):
    FAVORABLE = "FAVORABLE"
    ACCEPTABLE = "ACCEPTABLE"
    BREAKEVEN = "BREAKEVEN"
    LOSS = "LOSS"
