# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from sierp3d.builder import InvalidArgument, build
from sierp3d.render import draw_mesh

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

MAX_GUI_DEPTH = 5  # глибше вікно Tk надовго «зависає»


class SierpinskiApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Sierpinski tetrahedron")
        self.geometry("800x650")

        self.fig = None
        self.ax = None
        self.canvas = None
        self.mesh = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Параметри ---
        input_frame = ttk.LabelFrame(main, text="Параметри")
        input_frame.pack(fill="x", pady=5)

        ttk.Label(input_frame, text="Кількість ітерацій (глибина):").grid(
            row=0, column=0, sticky="w", padx=5, pady=5
        )
        self.nb_it_var = tk.IntVar(value=3)
        ttk.Spinbox(input_frame, from_=0, to=MAX_GUI_DEPTH, width=8, textvariable=self.nb_it_var).grid(
            row=0, column=1, sticky="w", padx=5, pady=5
        )

        # --- Кнопки ---
        buttons = ttk.Frame(main)
        buttons.pack(fill="x", pady=10)
        ttk.Button(buttons, text="Побудувати", command=self.run_build).pack(side="left", fill="x", expand=True)
        ttk.Button(buttons, text="Зберегти OFF…", command=self.save_off).pack(side="left", fill="x", expand=True)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.vertices_var = tk.StringVar(value="—")
        self.triangles_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Вершини:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.vertices_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Трикутники:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.triangles_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        # --- Фрейм для 3D-графіка ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def run_build(self):
        try:
            nb_it = self.nb_it_var.get()
        except tk.TclError:
            messagebox.showerror("Помилка", "Кількість ітерацій має бути невід’ємним цілим числом.")
            return
        if nb_it > MAX_GUI_DEPTH:
            messagebox.showerror("Помилка", f"Для вікна глибина обмежена {MAX_GUI_DEPTH}.")
            return

        try:
            self.mesh = build(nb_it)
        except InvalidArgument as e:
            messagebox.showerror("Помилка", str(e))
            return

        draw_mesh(self.ax, self.mesh.vertices, self.mesh.triangles)
        self.ax.set_title(f"Sierpinski tetrahedron, nb_it = {nb_it}")
        self.canvas.draw()

        report = self.mesh.validate()
        self.vertices_var.set(str(report["vertices"]))
        self.triangles_var.set(str(report["triangles"]))
        problems = [k for k, v in report.items() if isinstance(v, list) and v]
        self.valid_var.set("OK" if not problems else "Є проблеми: " + ", ".join(problems))

    def save_off(self):
        if self.mesh is None:
            messagebox.showinfo("Немає сітки", "Спершу побудуйте тетраедр.")
            return
        path = filedialog.asksaveasfilename(defaultextension=".off", filetypes=[("OFF", "*.off")])
        if not path:
            return
        self.mesh.write_off(path)
        messagebox.showinfo("Готово", f"Записано файл:\n  - {path}")


if __name__ == "__main__":
    app = SierpinskiApp()
    app.mainloop()
