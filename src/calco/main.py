import flet as ft

from calco.config.settings import settings
from calco.logging_config import setup_logging_from_settings
from calco.ui.app import main


def run() -> None:
    setup_logging_from_settings(settings)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
