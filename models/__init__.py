from models.giveaway import Giveaway, GiveawayEntry, GiveawayWinner, PrizeClaim
from models.loan_product import LoanPageSettings, LoanPageWidget, LoanProduct
from models.media import Media
from models.navigation import MenuItem, MobileMenuButton
from models.site_setting import SiteSetting

__all__ = [
    "Giveaway",
    "GiveawayEntry",
    "GiveawayWinner",
    "LoanPageSettings",
    "LoanPageWidget",
    "LoanProduct",
    "Media",
    "MenuItem",
    "MobileMenuButton",
    "PrizeClaim",
    "SiteSetting",
]
