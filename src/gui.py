import customtkinter
from datetime import datetime
from typing import Optional
from controllers.calculator_controller import CalculatorController
from domain.models import DateInput
from domain.state import CleantimeReport, Settings, WidgetState
from ui.date_picker import DatePicker
from ui.results_view import ResultsView

SOFTWARE_VERSION_V_LESS = '2.0.0'
SOFTWARE_VERSION = "v" + SOFTWARE_VERSION_V_LESS

APPEARANCE_MODES = ("system", "light", "dark")
COLOR_THEMES = ("blue", "green", "dark-blue")

HEADER_FONT = ("Arial", 26, "bold")
PROMPT_FONT = ("Arial", 16)

SECONDARY_COLOR = '#2d3542'

def apply_style(style: Optional[str]):
    customtkinter.set_appearance_mode("System")
    customtkinter.set_default_color_theme("blue")

    if not style:
        return
    style = style.lower()
    if style in APPEARANCE_MODES:
        customtkinter.set_appearance_mode(style.capitalize())
    elif style in COLOR_THEMES:
        customtkinter.set_default_color_theme(style)
    else:
        print(f"Unknown style '{style}', using default")

def build_app(settings: Settings, start: Optional[DateInput] = None) -> customtkinter.CTk:
    apply_style(settings.style)

    state = WidgetState.for_today(datetime.now(), settings)
    controller = CalculatorController(state)
    bundle = controller.bundle

    # Our app frame
    app = customtkinter.CTk()
    app.geometry("820x560")
    app.minsize(600, 400)
    app.title(f"{bundle.section_title} {SOFTWARE_VERSION}")

    header = customtkinter.CTkFrame(app, fg_color=SECONDARY_COLOR, corner_radius=0)
    header.pack(side='top', fill="x")
    title_label = customtkinter.CTkLabel(header, text=bundle.section_title, font=HEADER_FONT,
                                         text_color="white", pady=10)
    title_label.pack(side='top')

    form = customtkinter.CTkFrame(app, corner_radius=8)
    form.pack(side='top', fill="both", expand=True, padx=12, pady=12)

    prompt_label = customtkinter.CTkLabel(form, text=bundle.prompt, font=PROMPT_FONT)
    prompt_label.pack(side='top', pady=(10, 4))

    results = ResultsView(form, layout=settings.tag_layout)

    def show_report(report: CleantimeReport):
        results.show(report)

    controller.on_report = show_report

    picker = DatePicker(form, controller, bundle, on_calculate=controller.calculate)
    picker.pack(side='top', pady=4)

    results.pack(side='top', fill="both", expand=True)

    # A full date on the command line calculates straight away
    if start is not None:
        def _calculate_start():
            controller.calculate_for(start.year, start.month, start.day)
            picker.sync_from_state()

        app.after(50, _calculate_start)

    return app

def run(settings: Settings, start: Optional[DateInput] = None) -> None:
    app = build_app(settings, start)
    app.mainloop()
