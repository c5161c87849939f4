"""The main window: menus and a canvas showing the generated map."""

from __future__ import annotations

from typing import Any

from railway3.display import FONT_FAMILY, LINE_WIDTH, NAVY, RGB, Display

WINDOW_TITLE = "Залізниця-3"
WINDOW_SIZE = "800x600"

GENERATE_LABEL = "Згенерувати Україну"
EXIT_LABEL = "Вийти"
ABOUT_PROGRAM_LABEL = "Про програму"
ABOUT_GAME_LABEL = "Про гру"

ABOUT_PROGRAM_TEXT = "Програма 'Залізниця-3'.\n11-15 червня 2025 року."
ABOUT_GAME_TEXT = (
    "Це - гра-спостереження.\nНадається можливість змоделювати карту,\n"
    "прокласти по ній маршрути потягів і спостерігати як вони рухаються.\n"
    "Також є можливість прокладати нові гілки або знищувати існуючі.\n"
    "Типи поїздів впливають на їхні швидкості та часи зупинки на станціях.\n"
    "На часи стоянок поїздів впливають також типи самих станцій.\n"
    "Крім візуального спостереження можна проглядати розклади руху\n"
    "самих потягів, окремих станцій або отримувати інформацію про те,\n"
    "як дістатися з однієї станції до іншої.\n\n"
    "Приємного часопроведення! :-)"
)


def menu_layout() -> list[tuple[str, list[str | None]]]:
    """Menu titles in order with their item labels; ``None`` marks a separator."""
    return [
        ("Головне меню", [GENERATE_LABEL, "Завантажити мапу", "Зберегти мапу", None, EXIT_LABEL]),
        (
            "Потяги",
            ["Створити потяг", "Знищити потяг", "Проглянути потяг", "Змінити час відправлення"],
        ),
        (
            "Залізниця",
            ["Прокласти гілку", "Знищити гілку", "Проглянути станцію", "Як проїхати між..."],
        ),
        ("Запуск", []),
        ("Інформація", [ABOUT_PROGRAM_LABEL, ABOUT_GAME_LABEL]),
    ]


def _hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _paint(canvas: Any, display: Display, width: int, height: int) -> None:
    """Draw districts, stations and links onto a canvas once the map has links."""
    if not display.railmap.ways:
        return
    for tile in display.districts(width, height):
        colour = _hex(tile.color)
        canvas.create_rectangle(
            tile.x, tile.y, tile.x + tile.width, tile.y + tile.height,
            fill=colour, outline=colour,
        )
    navy = _hex(NAVY)
    marks, lines = display.stations_and_ways(width, height)
    for mark in marks:
        canvas.create_oval(
            mark.x, mark.y, mark.x + mark.diameter, mark.y + mark.diameter,
            outline=navy, width=LINE_WIDTH,
        )
        canvas.create_text(
            mark.label_x, mark.label_y, text=mark.name, anchor="sw",
            font=(FONT_FAMILY, mark.font_size), fill=navy,
        )
    for line in lines:
        canvas.create_line(line.x1, line.y1, line.x2, line.y2, fill=navy, width=LINE_WIDTH)


class MainWindow:
    """Builds the menus and canvas inside a Tk root window."""

    def __init__(self, root: Any) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self.root = root
        self.display = Display()
        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_SIZE)

        self.canvas = tk.Canvas(root, background="white", highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())

        commands = {
            GENERATE_LABEL: self.generate,
            EXIT_LABEL: root.quit,
            ABOUT_PROGRAM_LABEL: lambda: messagebox.showinfo(
                ABOUT_PROGRAM_LABEL, ABOUT_PROGRAM_TEXT, parent=root
            ),
            ABOUT_GAME_LABEL: lambda: messagebox.showinfo(
                ABOUT_GAME_LABEL, ABOUT_GAME_TEXT, parent=root
            ),
        }
        menubar = tk.Menu(root)
        for title, items in menu_layout():
            menu = tk.Menu(menubar, tearoff=False)
            for label in items:
                if label is None:
                    menu.add_separator()
                else:
                    menu.add_command(label=label, command=commands.get(label))
            menubar.add_cascade(label=title, menu=menu)
        root.config(menu=menubar)

    def generate(self) -> None:
        """Generate a new map and show it."""
        self.display.generate()
        self.redraw()

    def redraw(self) -> None:
        """Repaint the canvas at its current size."""
        self.canvas.delete("all")
        _paint(self.canvas, self.display, self.canvas.winfo_width(), self.canvas.winfo_height())


def main(argv: list[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0