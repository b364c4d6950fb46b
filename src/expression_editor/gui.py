"""Tkinter window for the expression editor.

Draws the five regions on a canvas and forwards clicks and button
presses to :class:`EditorPresenter`. The canvas is redrawn whenever the
model notifies.
"""

import tkinter as tk

from expression_editor.core import ExpressionEditorModel
from expression_editor.presenter import EditorPresenter
from expression_editor.regions import PANEL_HEIGHT, PANEL_WIDTH, text_points
from expression_editor.validators import OPERATOR_SYMBOLS

FRAME_WIDTH = PANEL_WIDTH
FRAME_HEIGHT = 700

HIGHLIGHT = "#ffff00"
OUTLINE = "#000000"
TEXT_FONT = ("Helvetica", 16)


class ExpressionEditorApp(tk.Tk):
    def __init__(self, model: ExpressionEditorModel | None = None):
        super().__init__()
        self.title("Expression Editor")
        self.geometry(f"{FRAME_WIDTH}x{FRAME_HEIGHT}")

        self.model = model if model is not None else ExpressionEditorModel()
        self.presenter = EditorPresenter(self.model)

        self._build_controls()
        self._build_canvas()

        self._unsubscribe = self.model.subscribe(self.redraw)
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self.redraw()

    # -------------------------
    # Widgets
    # -------------------------
    def _build_controls(self):
        controls = tk.Frame(self, height=FRAME_HEIGHT - PANEL_HEIGHT)
        controls.pack(fill="both", expand=True, side="top")
        for col in range(2):
            controls.columnconfigure(col, weight=1)

        self.operand_entry = tk.Entry(controls)
        self.operand_entry.insert(0, "00000")
        self.operand_entry.grid(row=0, column=0, padx=8, pady=8)

        buttons = tk.Frame(controls)
        buttons.grid(row=0, column=1, padx=8, pady=8)
        tk.Button(buttons, text="Set Operand", command=self._on_set_operand).pack(fill="x")
        tk.Button(buttons, text="Set Operator", command=self._on_set_operator).pack(fill="x")

        # Radio buttons share one variable, so exactly one operator is chosen
        self.operator_choice = tk.StringVar(value=OPERATOR_SYMBOLS[0])
        radios = tk.Frame(controls)
        radios.grid(row=1, column=0, padx=8, pady=8)
        for symbol in OPERATOR_SYMBOLS:
            tk.Radiobutton(
                radios, text=symbol, value=symbol, variable=self.operator_choice
            ).pack(anchor="w")

        self.error_label = tk.Label(controls, text="", fg="red")
        self.error_label.grid(row=1, column=1, padx=8, pady=8)

    def _build_canvas(self):
        self.canvas = tk.Canvas(self, width=PANEL_WIDTH, height=PANEL_HEIGHT, bg="white")
        self.canvas.pack(side="bottom")
        self.canvas.bind("<Button-1>", self._on_click)

    # -------------------------
    # Event handlers
    # -------------------------
    def _on_click(self, event):
        self.presenter.click(event.x, event.y)

    # The model notifies before the presenter updates its message,
    # so the label is refreshed after the submit returns
    def _on_set_operand(self):
        self.presenter.submit_operand(self.operand_entry.get())
        self._show_error()

    def _on_set_operator(self):
        self.presenter.submit_operator(self.operator_choice.get())
        self._show_error()

    def _show_error(self):
        self.error_label.configure(text=self.presenter.error_message)

    def _on_close(self):
        self._unsubscribe()
        self.destroy()

    # -------------------------
    # Drawing
    # -------------------------
    def redraw(self):
        self.canvas.delete("all")

        for region in self.presenter.regions:
            self.canvas.create_rectangle(*region.bounds, outline=OUTLINE)

        for text, (x, y) in zip(self.presenter.display_texts(), text_points()):
            self.canvas.create_text(x, y, text=text, anchor="sw", font=TEXT_FONT)

        # Tk has no alpha, a stipple gives the translucent look
        self.canvas.create_rectangle(
            *self.presenter.highlighted_region().bounds,
            fill=HIGHLIGHT,
            outline="",
            stipple="gray50",
        )


def run():
    app = ExpressionEditorApp()
    app.mainloop()
