import json

import pytest

from src.dashboard.app import app


@pytest.fixture(scope="module")
def dependencies():
    resp = app.server.test_client().get("/_dash-dependencies")
    assert resp.status_code == 200
    return {cb["output"]: cb for cb in resp.get_json()}


class TestProjectionCallbacks:
    def test_recalculates_on_buttons_only(self, dependencies):
        cb = dependencies["projection-results.children"]
        assert [(i["id"], i["property"]) for i in cb["inputs"]] == [
            ("calculate-btn", "n_clicks"),
            ("reset-btn", "n_clicks"),
        ]

    def test_deal_inputs_read_as_state(self, dependencies):
        cb = dependencies["projection-results.children"]
        assert {json.loads(s["id"])["type"] for s in cb["state"]} == {"deal-input"}
        assert {s["property"] for s in cb["state"]} == {"value", "id"}
