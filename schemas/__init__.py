from schemas.common import CamelModel, DisplayOrderItem, GiveawayOrder
from schemas.giveaway import (
    EntryCreate,
    GiveawayCreate,
    GiveawayUpdate,
    PrizeClaimUpdate,
    WinnerAction,
)
from schemas.loan_product import (
    ArticleFaq,
    ArticleSection,
    LoanPageSettingsUpdate,
    LoanProductCreate,
    LoanProductPut,
    WidgetCreate,
    WidgetPut,
)
from schemas.media import MediaUpdate
from schemas.navigation import MenuChild, MenuItemIn, MobileButtonIn, MobileButtonsPut, NavigationPut

__all__ = [
    "ArticleFaq",
    "ArticleSection",
    "CamelModel",
    "DisplayOrderItem",
    "EntryCreate",
    "GiveawayCreate",
    "GiveawayOrder",
    "GiveawayUpdate",
    "LoanPageSettingsUpdate",
    "LoanProductCreate",
    "LoanProductPut",
    "MediaUpdate",
    "MenuChild",
    "MenuItemIn",
    "MobileButtonIn",
    "MobileButtonsPut",
    "NavigationPut",
    "PrizeClaimUpdate",
    "WidgetCreate",
    "WidgetPut",
    "WinnerAction",
]
