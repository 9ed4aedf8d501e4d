import os
import sys

# The tinyscript modules live at the repository root, next to `tests/`; make
# them importable (and `tests.utils` with them) whatever directory pytest
# starts from.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
