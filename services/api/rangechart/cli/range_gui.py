from __future__ import annotations

import logging
import os
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, font as tkfont, messagebox, ttk

from ..cards import MalformedNotation
from ..config import load_settings
from ..geometry import GridGeometry, Point
from ..painting import RangeBrush, pointer_down, pointer_dragged, pointer_up
from ..range_model import RangeModel
from ..renderer import FillOp, LineOp, RangeChartRenderer, TextOp
from ..theme import DEFAULT_THEME

logger = logging.getLogger("range-chart")

# Tk state bits for Shift, Control and (on macOS) Command.
SHIFT_MASK = 0x0001
CONTROL_MASK = 0x0004
COMMAND_MASK = 0x0008


class RangeChartGUI:
    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.root.title("Range Chart")
        self.root.geometry("720x780")
        self.root.minsize(360, 420)
        self.settings = load_settings()
        self.model = RangeModel()
        self.brush = RangeBrush(self.model)
        self.renderer = RangeChartRenderer(
            theme=DEFAULT_THEME,
            indicates_invalid_distribution=self.settings.indicate_invalid,
        )
        self.brush_var = tk.StringVar(value=self.brush.action)
        self.invalid_var = tk.BooleanVar(value=self.settings.indicate_invalid)
        self.status_var = tk.StringVar(value="Click or drag to paint. Shift erases, Ctrl/Cmd paints call.")
        self.dragging = False
        self._configure_theme()
        self._build_layout()

    def _configure_theme(self) -> None:
        self.colors = {
            "bg": "#f6f4ef",
            "ink": "#1f2623",
            "canvas": "#ffffff",
        }
        self.root.configure(bg=self.colors["bg"])
        style = ttk.Style(self.root)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass
        style.configure("App.TFrame", background=self.colors["bg"])
        style.configure("App.TLabel", background=self.colors["bg"], foreground=self.colors["ink"])
        style.configure("App.TRadiobutton", background=self.colors["bg"], foreground=self.colors["ink"])
        style.configure("App.TCheckbutton", background=self.colors["bg"], foreground=self.colors["ink"])
        self.font_family = "Helvetica"

    def _build_layout(self) -> None:
        toolbar = ttk.Frame(self.root, style="App.TFrame", padding=(10, 8))
        toolbar.pack(side="top", fill="x")
        ttk.Label(toolbar, text="Brush:", style="App.TLabel").pack(side="left")
        for action in ("raise", "call", "fold"):
            ttk.Radiobutton(
                toolbar,
                text=action.capitalize(),
                value=action,
                variable=self.brush_var,
                command=self._set_brush,
                style="App.TRadiobutton",
            ).pack(side="left", padx=4)
        ttk.Checkbutton(
            toolbar,
            text="Indicate invalid",
            variable=self.invalid_var,
            command=self._toggle_invalid,
            style="App.TCheckbutton",
        ).pack(side="left", padx=12)
        ttk.Button(toolbar, text="Clear", command=self._clear).pack(side="right", padx=4)
        ttk.Button(toolbar, text="Save", command=self._save_range).pack(side="right", padx=4)
        ttk.Button(toolbar, text="Load", command=self._load_range).pack(side="right", padx=4)

        self.canvas = tk.Canvas(self.root, bg=self.colors["canvas"], highlightthickness=0)
        self.canvas.pack(side="top", fill="both", expand=True, padx=10)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

        ttk.Label(self.root, textvariable=self.status_var, style="App.TLabel", padding=(10, 6)).pack(
            side="bottom", fill="x"
        )

    def _geometry(self) -> GridGeometry:
        # Tk canvases use a top-left origin regardless of RANGE_CHART_ORIGIN.
        return GridGeometry(
            width=self.canvas.winfo_width(),
            height=self.canvas.winfo_height(),
            center_horizontally=self.settings.center_horizontally,
            center_vertically=self.settings.center_vertically,
        )

    def redraw(self) -> None:
        self.canvas.delete("all")
        plan = self.renderer.render(self._geometry(), self.model)
        for op in plan.operations():
            if isinstance(op, FillOp):
                rect = op.rect
                self.canvas.create_rectangle(
                    rect.x, rect.y, rect.max_x, rect.max_y, fill=op.color.to_hex(), width=0
                )
            elif isinstance(op, LineOp):
                self.canvas.create_line(op.start.x, op.start.y, op.end.x, op.end.y, fill=op.color.to_hex(), width=1)
            elif isinstance(op, TextOp):
                center = op.rect.center
                font = tkfont.Font(family=self.font_family, size=max(1, int(op.font_size)))
                self.canvas.create_text(center.x, center.y, text=op.text, fill=op.color.to_hex(), font=font)
        if plan.invalid_hands and self.invalid_var.get():
            self.status_var.set(f"{len(plan.invalid_hands)} invalid distribution(s)")

    def _modifiers(self, event: tk.Event) -> tuple[bool, bool]:
        state = int(event.state)
        primary = bool(state & (CONTROL_MASK | COMMAND_MASK))
        secondary = bool(state & SHIFT_MASK)
        return primary, secondary

    def _on_press(self, event: tk.Event) -> None:
        primary, secondary = self._modifiers(event)
        dirty = pointer_down(self._geometry(), Point(event.x, event.y), self.brush, primary, secondary)
        self.dragging = dirty is not None
        if dirty is not None:
            self.redraw()

    def _on_drag(self, event: tk.Event) -> None:
        if not self.dragging:
            return
        primary, secondary = self._modifiers(event)
        dirty = pointer_dragged(self._geometry(), Point(event.x, event.y), self.brush, primary, secondary)
        if dirty is not None:
            self.redraw()

    def _on_release(self, event: tk.Event) -> None:
        if not self.dragging:
            return
        self.dragging = False
        primary, secondary = self._modifiers(event)
        pointer_up(self.brush, primary, secondary)
        self.status_var.set(f"{len(self.model)} hand(s) in range")

    def _set_brush(self) -> None:
        self.brush.action = self.brush_var.get()  # type: ignore[assignment]

    def _toggle_invalid(self) -> None:
        self.renderer.indicates_invalid_distribution = self.invalid_var.get()
        self.redraw()

    def _clear(self) -> None:
        self.model.clear()
        self.redraw()

    def _load_range(self) -> None:
        path = filedialog.askopenfilename(filetypes=[("Range text", "*.txt"), ("All files", "*.*")])
        if not path:
            return
        try:
            loaded = RangeModel.from_text(Path(path).read_text(encoding="utf-8"))
        except (OSError, MalformedNotation) as exc:
            messagebox.showerror("Load failed", str(exc))
            return
        self.model.clear()
        for distribution in loaded:
            self.model.set(distribution)
        logger.info("loaded range from %s (%d hands)", path, len(self.model))
        self.status_var.set(f"Loaded {os.path.basename(path)}")
        self.redraw()

    def _save_range(self) -> None:
        path = filedialog.asksaveasfilename(defaultextension=".txt", filetypes=[("Range text", "*.txt")])
        if not path:
            return
        try:
            Path(path).write_text(self.model.to_text(), encoding="utf-8")
        except OSError as exc:
            messagebox.showerror("Save failed", str(exc))
            return
        self.status_var.set(f"Saved {os.path.basename(path)}")


def main() -> None:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    root = tk.Tk()
    RangeChartGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
