"""Command-line entry point: find a path on a layout and walk it headless."""

import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication, QTimer

from .domain.types import WalkerConfig
from .utils.layouts import LAYOUTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridwalk",
        description="Find a path with A* and walk the occupant to the goal",
    )
    parser.add_argument("--layout", choices=sorted(LAYOUTS), default="demo",
                        help="Map layout to load")
    parser.add_argument("--width", type=int, default=10, help="Grid width for sized layouts")
    parser.add_argument("--height", type=int, default=10, help="Grid height for sized layouts")
    parser.add_argument("--speed", type=float, default=WalkerConfig.move_speed,
                        help="Walk speed in cells per second")
    parser.add_argument("--tick-ms", type=int, default=16, help="Walk tick interval in ms")
    parser.add_argument("--timeout", type=float, default=60.0,
                        help="Give up after this many seconds")
    parser.add_argument("--verbose", action="store_true", help="Log every path step")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("gridwalk")

    # Import after the application object exists
    from .app.controller import NavigationController

    controller = NavigationController(walker_config=WalkerConfig(move_speed=args.speed))
    controller.update_config(tick_interval_ms=args.tick_ms)
    outcome = {"code": 1}

    def finish(code: int):
        outcome["code"] = code
        app.quit()

    def on_error(text: str):
        print(f"Error: {text}")
        finish(2)

    controller.message.connect(lambda text: print(text))
    controller.error_occurred.connect(on_error)
    controller.no_path.connect(lambda result: QTimer.singleShot(0, lambda: finish(1)))
    controller.walk_finished.connect(lambda: QTimer.singleShot(0, lambda: finish(0)))
    controller.waypoint_reached.connect(lambda coord: print(f"Arrived at {coord}"))

    if not controller.load_layout(args.layout, args.width, args.height):
        return 2

    watchdog = QTimer()
    watchdog.setSingleShot(True)
    watchdog.timeout.connect(lambda: finish(3))
    watchdog.start(int(args.timeout * 1000))
    QTimer.singleShot(0, controller.start_movement)

    try:
        app.exec()
    finally:
        watchdog.stop()
        controller.stop_movement()

    return outcome["code"]


if __name__ == "__main__":
    sys.exit(main())
