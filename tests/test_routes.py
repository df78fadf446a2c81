import pytest

from webapp.context import get_context
from webapp.registry import Registration


def test_root(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.get_json() == {"root": True}


def test_example(client):
    res = client.get("/example")

    assert res.status_code == 200
    assert res.get_data(as_text=True) == "this is an example"


def test_example_uses_support_plugin(client):
    res = client.get("/example/support")

    assert res.status_code == 200
    assert res.get_json() == {"support": "hugs"}


def test_health_ok(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.get_json() == {"status": "ok", "stage": "serving"}


def test_health_reports_unreachable_database(make_app, monkeypatch):
    app = make_app()
    with app.app_context():
        monkeypatch.setattr(get_context().mongo, "ping", lambda: False)

    res = app.test_client().get("/health")

    assert res.status_code == 503
    assert res.get_json()["status"] == "unavailable"


def test_unknown_path_is_json_404(client):
    res = client.get("/no/such/thing")

    assert res.status_code == 404
    payload = res.get_json()
    assert payload["statusCode"] == 404
    assert payload["error"] == "Not Found"
    assert payload["message"]


@pytest.mark.parametrize("testing", [True, False])
def test_unhandled_error_becomes_500_and_app_keeps_serving(make_app, testing):
    def explode():
        raise RuntimeError("kaboom")

    def route(app, ctx, opts):
        app.add_url_rule("/explode", "explode", explode)

    from webapp.routes import ROUTES

    app = make_app(routes=list(ROUTES) + [Registration("explode", route)])
    app.config.update(TESTING=testing)
    client = app.test_client()

    res = client.get("/explode")
    assert res.status_code == 500
    payload = res.get_json()
    assert payload["statusCode"] == 500
    assert payload["error"] == "Internal Server Error"
    assert payload["message"] == "An internal server error occurred"
    assert "kaboom" not in payload["message"]

    assert client.get("/").status_code == 200


def test_prefix_option_moves_routes(make_app):
    client = make_app(options={"prefix": "/api"}).test_client()

    assert client.get("/api/").get_json() == {"root": True}
    assert client.get("/api/example").get_data(as_text=True) == "this is an example"
    assert client.get("/api/pages/hello?name=Lin").status_code == 200
    assert client.get("/api/health").status_code == 200


def test_cors_headers(client):
    res = client.get("/", headers={"Origin": "http://localhost:5173"})

    # flask-cors 6 echoes the origin back, older releases send "*"
    assert res.headers["Access-Control-Allow-Origin"] in ("*", "http://localhost:5173")


def test_cors_without_origin_header(client):
    res = client.get("/")

    assert res.status_code == 200
    assert res.headers.get("Access-Control-Allow-Origin") in (None, "*")


def test_cors_origins_from_config(make_app, env):
    env["CORS_ORIGINS"] = "http://localhost:5173, https://example.org"
    client = make_app(env=env).test_client()

    allowed = client.get("/", headers={"Origin": "https://example.org"})
    denied = client.get("/", headers={"Origin": "https://evil.test"})

    assert allowed.headers["Access-Control-Allow-Origin"] == "https://example.org"
    assert "Access-Control-Allow-Origin" not in denied.headers
