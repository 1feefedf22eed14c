"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import os
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("HIJRI_CALENDAR_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        logger.debug("DPI awareness not available on this platform")

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    def on_settings() -> None:
        cal_win.root.after(0, cal_win.open_settings)

    def on_about() -> None:
        cal_win.root.after(0, cal_win.open_about)

    icon_image = create_icon_image(cal_win.today, cal_win.highlight_color)
    tray = create_tray(icon_image, cal_win.today, on_show, on_exit,
                       on_settings=on_settings, on_about=on_about,
                       lang=cal_win.language)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Hijri calendar started for %s", cal_win.today)

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
