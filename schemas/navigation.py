from typing import Optional

from schemas.common import CamelModel


class MenuChild(CamelModel):
    label: str
    url: str
    open_in_new_tab: bool = False
    enabled: bool = True


class MenuItemIn(CamelModel):
    label: str
    url: str
    open_in_new_tab: bool = False
    enabled: bool = True
    show_on_desktop: bool = True
    show_on_mobile_bar: bool = False
    show_in_hamburger: bool = True
    children: list[MenuChild] = []


class NavigationPut(CamelModel):
    main_menu: Optional[list[MenuItemIn]] = None


class MobileButtonIn(CamelModel):
    label: str
    url: str
    icon: Optional[str] = None
    button_type: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_color: Optional[str] = None
    is_active: bool = True


class MobileButtonsPut(CamelModel):
    buttons: Optional[list[MobileButtonIn]] = None
