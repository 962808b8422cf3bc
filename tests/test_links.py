from entities import coerce_entity
from entities.links import create_ref, lookup


def test_create_ref_prefixes_api_side(monkeypatch):
    monkeypatch.setenv("SELF_URL", "https://kyso.example.org/")
    link = create_ref("/teams/acme")

    assert link.api == "https://kyso.example.org/v1/teams/acme"
    assert link.ui == "/teams/acme"


def test_create_ref_without_self_url(monkeypatch):
    monkeypatch.delenv("SELF_URL")
    assert create_ref("/users/bob").api == "/v1/users/bob"


def test_lookup_tolerates_missing_pieces():
    team = coerce_entity({"id": "t1"}, "Team")

    assert lookup(None, "team", "t1") is None
    assert lookup({"team": {"t1": team}}, "team", None) is None
    assert lookup({"team": {"t1": team}}, "user", "t1") is None
    assert lookup({"team": {"t1": team}}, "team", "t1") is team


def test_entities_without_names_link_by_id():
    assert coerce_entity({"id": "o1"}, "Organization").build_hyperlink().ui == "/organizations/o1"
    assert coerce_entity({"id": "t1", "name": "  "}, "Team").build_hyperlink().ui == "/teams/t1"


def test_comment_links_under_resolved_report():
    team = coerce_entity({"id": "t1", "name": "acme"}, "Team")
    report = coerce_entity({"id": "r1", "name": "q3", "team_id": "t1"}, "Report")
    comment = coerce_entity({"id": "c1", "report_id": "r1"}, "Comment")
    relations = {"team": {"t1": team}, "report": {"r1": report}}

    assert comment.build_hyperlink(relations).ui == "/reports/acme/q3/comments/c1"
    assert comment.build_hyperlink({}).ui == "/comments/c1"


def test_opaque_entities_get_no_link():
    widget = coerce_entity({"id": "w1"}, "Widget")

    assert widget.build_hyperlink() is None
    assert widget.with_hyperlink() is widget
