import argparse
import logging
import tkinter as tk

from config import Config
from logging_setup import setup_logging
from store import HabitStore
from ui import theme
from ui.tracker import HabitTracker

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, config: Config, store: HabitStore = None):
        super().__init__()
        self.settings = config
        self.title(config.title)
        self.geometry(config.geometry)
        self.configure(bg=theme.BG)
        self.store = store if store is not None else HabitStore()

        self.page = HabitTracker(parent=self, controller=self)
        self.page.pack(fill="both", expand=True)
        self.page.refresh()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Track habits and their completion.")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--logo", help="path to the header logo image")
    parser.add_argument("--geometry", help="window size as WIDTHxHEIGHT")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = Config.from_env().with_overrides(
        log_level=args.log_level, logo_path=args.logo, geometry=args.geometry
    )
    setup_logging(config.log_level_value, config.log_file)
    logger.info("Starting %s", config.title)
    App(config).mainloop()


if __name__ == "__main__":
    main()
