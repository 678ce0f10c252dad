import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_imports():
    """Ensure core modules can be imported without crashing."""
    import auth  # noqa: F401
    import ui  # noqa: F401
    import infrastructure.observability  # noqa: F401
    import infrastructure.identity.supabase_identity  # noqa: F401
    import infrastructure.repositories.supabase_waitlist_repository  # noqa: F401
    import utils.session_manager  # noqa: F401
    import views.landing_view  # noqa: F401
    import views.auth_view  # noqa: F401
    import views.callback_view  # noqa: F401
    import views.dashboard_view  # noqa: F401
    import use_cases.bootstrap  # noqa: F401


@pytest.mark.parametrize(
    "module",
    [
        "infrastructure.identity.supabase_identity",
        "infrastructure.repositories.supabase_waitlist_repository",
        "use_cases",
        "use_cases.auth_flow",
        "use_cases.waitlist_flow",
        "auth",
        "utils.session_manager",
        "views.callback_view",
    ],
)
def test_module_imports_first_in_fresh_interpreter(module):
    # Each module must load on its own, whatever was imported before it.
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
