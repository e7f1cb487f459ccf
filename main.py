"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading
from datetime import date

from annotator import preview_annotations
from calendar_model import CalendarModel
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from settings import load_settings
from tray_icon import create_tray


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings["log_level"]),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    holidays, on_leave = preview_annotations(date.today())
    model = CalendarModel(holidays, on_leave, match_year=settings["match_year"])
    cal_win = CalendarWindow(model, settings)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_today() -> None:
        cal_win.root.after(0, cal_win.go_today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.close()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit, on_today=on_today)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
