"""
Application Initialization
==========================
Builds the session, hands it to the viewer and starts the matplotlib event
loop.
"""
import logging

from hullview.logging_config import setup_logging
from hullview.session import HullSession
from hullview.viewer import HullViewer


def main() -> None:
    setup_logging(level=logging.INFO)

    session = HullSession()
    viewer = HullViewer(session)
    viewer.show()


if __name__ == "__main__":
    main()
