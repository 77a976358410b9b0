"""Static enumerations shared by params and configuration."""

from enum import Enum


class PriceType(str, Enum):
    """The type of the price of a service."""
    FLAT = "flat"


class BlockchainType(str, Enum):
    """The blockchain network the agent is bound to."""
    LOCAL = "local"
    TEST = "ropsten"
    MAIN = "main"


class ContractTypes(str, Enum):
    """DAV contract names."""
    IDENTITY = "Identity"
    DAV_TOKEN = "DAVToken"
    BASIC_MISSION = "BasicMission"
