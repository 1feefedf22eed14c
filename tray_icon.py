"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from hijri_date import HijriDate


def tray_title(today: HijriDate, lang: str = "en") -> str:
    """Tooltip text, e.g. ``Hijri Calendar – 1 Muharram 1446``."""
    return f"Hijri Calendar – {today.format('D MONTH YYYY', lang)}"


def create_tray(
    icon_image: Image.Image,
    today: HijriDate,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_settings: Callable[[], None] | None = None,
    on_about: Callable[[], None] | None = None,
    lang: str = "en",
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    if on_about is not None:
        items.append(MenuItem("About", lambda _icon, _item: on_about()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    icon = pystray.Icon("hijri-calendar", icon_image, tray_title(today, lang), menu)
    return icon
