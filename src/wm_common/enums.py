"""Global enums - values match the Warframe.Market wire format exactly."""

from enum import Enum


class OrderType(str, Enum):
    SELL = "sell"
    BUY = "buy"


class SellerStatus(str, Enum):
    INGAME = "ingame"
    ONLINE = "online"
    OFFLINE = "offline"
    UNKNOWN = "unknown"  # any status string we don't recognise


class StatusFloor(str, Enum):
    """Minimum seller presence. INGAME ⊆ ONLINE ⊆ ANY."""
    ANY = "any"
    ONLINE = "online"
    INGAME = "ingame"


class Platform(str, Enum):
    PC = "pc"
    XBOX = "xbox"
    PS4 = "ps4"
    SWITCH = "switch"


class Polarity(str, Enum):
    MADURAI = "madurai"
    VAZARIN = "vazarin"
    NARAMON = "naramon"
    ZENURIK = "zenurik"
    ANY = "any"


class RivenSort(str, Enum):
    PRICE_DESC = "price_desc"
    PRICE_ASC = "price_asc"
    POSITIVE_ATTR_DESC = "positive_attr_desc"
    POSITIVE_ATTR_ASC = "positive_attr_asc"


class BuyoutPolicy(str, Enum):
    DIRECT = "direct"
    AUCTION_ONLY = "auction_only"
    BOTH = "both"
