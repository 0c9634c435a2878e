import sys
import os

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Shared sample tables live next to this file
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)
