"""
Behave environment configuration

This file is run before and after test scenarios to set up and tear down
the test environment.
"""

import os
import sys

# Add project root to Python path so we can import the findingaid package
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def before_scenario(context, scenario):
    """Run before each scenario"""
    # Records from a previous scenario must not leak into the next one
    for attr in ("document", "splitter", "records", "error"):
        if hasattr(context, attr):
            delattr(context, attr)
