"""
Main entry point for the venue ordering system
"""
import sys

from config import AppConfig
from core.order_system import VenueOrderSystem
from log_config import configure_logging
from ui.simple_ui import SimpleOrderUI


def main(argv=None):
    # console (default) runs the staff terminal, web runs the JSON API
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if argv else "console"

    config = AppConfig.from_env()
    configure_logging(config.log_level)

    if mode == "console":
        SimpleOrderUI(VenueOrderSystem(config)).run()
    elif mode == "web":
        from app import create_app
        create_app(config=config).run(host="0.0.0.0", port=config.port, debug=config.debug)
    else:
        print("Usage: python main.py [console|web]")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
