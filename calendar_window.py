"""Single-month calendar window (tkinter) with holiday and leave markers."""

import logging
import tkinter as tk
from tkinter import font as tkfont

from annotator import DayCellFacts
from calendar_logic import DAY_ABBR, WEEKS, DateOverflow, weeks
from calendar_model import CalendarModel
from cell_style import day_color, ellipsize, tooltip_lines

logger = logging.getLogger(__name__)

GRID_BG = "white"
ERROR_FG = "#CC0000"
LEAVE_DIAMETER = 20
TIP_BG = "#FFFFE0"


class _CellTip:
    """Hover popup beside a day cell; long occasions wrap instead of widening it."""

    __slots__ = ("_root", "_popup", "_wrap")

    def __init__(self, root: tk.Misc, wrap: int = 180) -> None:
        self._root = root
        self._popup: tk.Toplevel | None = None
        self._wrap = wrap

    def show(self, cell: tk.Widget, lines: list[str]) -> None:
        self.hide()
        popup = tk.Toplevel(self._root)
        popup.wm_overrideredirect(True)
        popup.wm_attributes("-topmost", True)
        tk.Message(
            popup, text="\n".join(lines), width=self._wrap,
            bg=TIP_BG, fg="black", relief="solid", borderwidth=1,
        ).pack()
        # Right of the cell, top edges aligned
        x = cell.winfo_rootx() + cell.winfo_width() + 4
        y = cell.winfo_rooty()
        popup.wm_geometry(f"+{x}+{y}")
        self._popup = popup

    def hide(self) -> None:
        if self._popup is not None:
            self._popup.destroy()
            self._popup = None


class CalendarWindow:
    """Month grid bound to a ``CalendarModel``; redraws on every change."""

    def __init__(self, model: CalendarModel, settings: dict,
                 root: tk.Tk | None = None) -> None:
        self.model = model
        self.root = root or tk.Tk()
        self.root.title("Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)

        self._colors: dict[str, str] = dict(settings["colors"])
        self._cell_w: int = settings["cell_width"]
        self._cell_h: int = settings["cell_height"]

        self._setup_fonts()

        # Canvas id -> facts of the cell currently drawn on it
        self._cell_facts: dict[int, DayCellFacts] = {}
        self._cells: list[list[tk.Canvas]] = []
        self._build()
        self._tooltip = _CellTip(self.root, wrap=self._cell_w * 3)

        self._unsubscribe = model.subscribe(self._on_model_change)
        self.render()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        self.font_header = tkfont.Font(root=self.root, size=16, weight="bold")
        self.font_weekday = tkfont.Font(root=self.root, size=10)
        self.font_day = tkfont.Font(root=self.root, size=12)
        self.font_small = tkfont.Font(root=self.root, size=10)

    # ------------------------------------------------------------------
    # Build widgets (once)
    # ------------------------------------------------------------------
    def _build(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=12, pady=12)

        self._header = tk.Label(outer, font=self.font_header, bg=GRID_BG)
        self._header.pack(pady=(0, 6))

        grid = tk.Frame(outer, bg=GRID_BG)
        grid.pack()

        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(
                grid, text=abbr, font=self.font_weekday, bg=GRID_BG,
                width=max(1, self._cell_w // 10), height=2,
            ).grid(row=0, column=col)

        for r in range(WEEKS):
            row_cells: list[tk.Canvas] = []
            for c in range(7):
                cell = tk.Canvas(
                    grid, width=self._cell_w, height=self._cell_h,
                    bg=GRID_BG, highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c, padx=2, pady=5)
                cell.bind("<Enter>", self._on_cell_enter)
                cell.bind("<Leave>", self._on_cell_leave)
                row_cells.append(cell)
            self._cells.append(row_cells)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _on_model_change(self, _model: CalendarModel) -> None:
        self.render()

    def render(self) -> None:
        self._cell_facts.clear()
        self._header.configure(text=self.model.header, fg=self._colors["primary_fg"])
        for row_cells, row_facts in zip(self._cells, weeks(self.model.cells)):
            for cell, facts in zip(row_cells, row_facts):
                self._draw_cell(cell, facts)
                self._cell_facts[id(cell)] = facts

    def show_error(self, message: str) -> None:
        """Replace the grid with an error state; no partial grid is shown."""
        self._cell_facts.clear()
        self._header.configure(text=message, fg=ERROR_FG)
        for row_cells in self._cells:
            for cell in row_cells:
                cell.delete("all")
                cell.configure(bg=GRID_BG)

    def _draw_cell(self, cell: tk.Canvas, facts: DayCellFacts) -> None:
        cell.delete("all")
        w, h = self._cell_w, self._cell_h
        cell.configure(bg=self._colors["holiday_bg"] if facts.holiday else GRID_BG)

        # Day number, top-right
        cell.create_text(w - 4, 3, text=str(facts.day_of_month), anchor="ne",
                         fill=day_color(facts, self._colors), font=self.font_day)

        if facts.holiday:
            label = ellipsize(facts.holiday.occasion, self.font_small, w - 4)
            cell.create_text(w // 2, h - 8, text=label, anchor="s",
                             fill=self._colors["primary_fg"], font=self.font_small)

        if facts.leave:
            top = (h - LEAVE_DIAMETER) // 2
            cell.create_oval(0, top, LEAVE_DIAMETER, top + LEAVE_DIAMETER,
                             fill=self._colors["leave_bg"], outline="")
            cell.create_text(LEAVE_DIAMETER // 2, top + LEAVE_DIAMETER // 2,
                             text=str(facts.leave.count),
                             fill=self._colors["leave_fg"], font=self.font_small)

    # ------------------------------------------------------------------
    # Tooltip on hover
    # ------------------------------------------------------------------
    def _on_cell_enter(self, event: tk.Event) -> None:
        facts = self._cell_facts.get(id(event.widget))
        if facts is None:
            return
        lines = tooltip_lines(facts)
        if lines:
            self._tooltip.show(event.widget, lines)

    def _on_cell_leave(self, _event: tk.Event) -> None:
        self._tooltip.hide()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def set_reference_date(self, value) -> None:
        """Point the model at *value*'s month; shows an error if out of range."""
        self._update(lambda: setattr(self.model, "reference_date", value))

    def _update(self, change) -> None:
        try:
            change()
        except DateOverflow as exc:
            logger.error("Cannot render calendar: %s", exc)
            self.show_error("Date out of range")

    def go_today(self) -> None:
        self.set_reference_date(self.model.today())

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._update(self.model.refresh)
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._tooltip.hide()
        self.root.withdraw()

    def close(self) -> None:
        self._unsubscribe()
        self.root.destroy()
