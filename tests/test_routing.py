import pytest

from use_cases.routing import Route, build_url, callback_destination, is_guarded, resolve_route


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/", Route.LANDING),
        ("", Route.LANDING),
        (None, Route.LANDING),
        ("/auth", Route.AUTH),
        ("auth/", Route.AUTH),
        ("/auth/callback", Route.AUTH_CALLBACK),
        ("/dashboard", Route.DASHBOARD),
    ],
)
def test_known_paths_resolve(path, expected):
    resolution = resolve_route(path)
    assert resolution.route == expected
    assert resolution.redirected is False


@pytest.mark.parametrize("path", ["/admin", "/dashboard/settings", "/auth/unknown"])
def test_unknown_paths_redirect_to_landing(path):
    resolution = resolve_route(path)
    assert resolution.route == Route.LANDING
    assert resolution.redirected is True


def test_only_dashboard_is_guarded():
    assert [r for r in Route if is_guarded(r)] == [Route.DASHBOARD]


def test_callback_destination(verified_session, unverified_session):
    assert callback_destination(verified_session) == Route.DASHBOARD
    # Any session counts here; the dashboard guard enforces verification.
    assert callback_destination(unverified_session) == Route.DASHBOARD
    assert callback_destination(None) == Route.AUTH


def test_build_url():
    assert build_url("https://uniface.app/", Route.AUTH_CALLBACK) == "https://uniface.app/?route=%2Fauth%2Fcallback"
    assert build_url("http://localhost:8501", Route.AUTH_CALLBACK, flow="abc").endswith("&flow=abc")
