# ui/results_view.py
from __future__ import annotations

import customtkinter as ctk

from domain.state import CleantimeReport
from libuniversal import TagLayout
from ui.images import get_keytag_image

LINEAR_PER_ROW = 14
TABULAR_PER_ROW = 6
LINEAR_TAG_HEIGHT = 110
TABULAR_TAG_HEIGHT = 140


class ResultsView(ctk.CTkFrame):
    def __init__(self, parent, layout: TagLayout, font=("Arial", 16)):
        super().__init__(parent, corner_radius=0, fg_color="transparent")

        self.layout = layout

        self.days_label = ctk.CTkLabel(self, text="", font=(font[0], font[1] + 4, "bold"))
        self.main_label = ctk.CTkLabel(self, text="", font=font)

        self.tags_frame = ctk.CTkScrollableFrame(self, corner_radius=0, fg_color="transparent")

        self._tag_labels: list[ctk.CTkLabel] = []

    def show(self, report: CleantimeReport):
        # repack in order so the blurbs always sit above the tags
        self.clear()

        self.days_label.configure(text=report.days_blurb)
        self.days_label.pack(side="top", pady=(10, 0))

        if report.main_blurb:
            self.main_label.configure(text=report.main_blurb)
            self.main_label.pack(side="top")
        else:
            self.main_label.pack_forget()

        self._render_tags(report)

    def clear(self):
        self.days_label.pack_forget()
        self.main_label.pack_forget()
        self.tags_frame.pack_forget()
        self._clear_tags()

    # -------- internal --------

    def _clear_tags(self):
        for lbl in self._tag_labels:
            lbl.destroy()
        self._tag_labels = []

    def _render_tags(self, report: CleantimeReport):
        self._clear_tags()
        if not report.keytags:
            self.tags_frame.pack_forget()
            return

        tabular = self.layout != TagLayout.LINEAR
        per_row = TABULAR_PER_ROW if tabular else LINEAR_PER_ROW
        height = TABULAR_TAG_HEIGHT if tabular else LINEAR_TAG_HEIGHT
        pad = 6 if tabular else 0

        for i, tag in enumerate(report.keytags):
            lbl = ctk.CTkLabel(self.tags_frame, text="", image=get_keytag_image(tag, height=height))
            lbl.grid(row=i // per_row, column=i % per_row, padx=pad, pady=pad, sticky="n")
            self._tag_labels.append(lbl)

        self.tags_frame.pack(side="top", fill="both", expand=True, padx=10, pady=10)
