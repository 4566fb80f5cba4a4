"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import threading
from datetime import date

from loguru import logger
from PIL import ImageTk

from icon_gen import create_icon_image
from picker_window import PickerWindow
from tray_icon import create_tray


def main() -> None:
    # DPI awareness so fonts are crisp on Hi-DPI monitors (Windows only)
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    # The only clock read: the picker itself is handed "today"
    today = date.today()
    picker_win = PickerWindow(today)

    icon_image = create_icon_image(today.day)
    icon_photo = ImageTk.PhotoImage(icon_image, master=picker_win.root)
    picker_win.root.iconphoto(True, icon_photo)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        picker_win.root.after(0, picker_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            picker_win.root.destroy()
        picker_win.root.after(0, _quit)

    def on_settings() -> None:
        picker_win.root.after(0, picker_win.open_settings)

    tray = create_tray(icon_image, today, on_show, on_exit, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Mini Date Picker running (today is {})", today.isoformat())

    picker_win.show()
    # tkinter main loop on the main thread
    picker_win.root.mainloop()


if __name__ == "__main__":
    main()
