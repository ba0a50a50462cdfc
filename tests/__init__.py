import os
import sys

from core import configure_logging

FIXTURES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fixtures")
APP_PATH = os.path.join(FIXTURES_DIR, "sample_app")
APP_PACKAGE = "sample_app"

# sample_app is imported by name during discovery
if FIXTURES_DIR not in sys.path:
    sys.path.insert(0, FIXTURES_DIR)

configure_logging("WARNING")
