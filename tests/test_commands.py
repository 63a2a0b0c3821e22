"""Integration tests for the seed-all and render-cv CLI commands."""

import pytest

from cvstudio.database.seed.seed_cvs import DEMO_USER_ID
from cvstudio.services.cv_store import CvAggregateStore

pytestmark = pytest.mark.integration


def test_seed_all_is_idempotent(app):
    runner = app.test_cli_runner()

    assert runner.invoke(args=["seed-all"]).exit_code == 0
    assert runner.invoke(args=["seed-all"]).exit_code == 0

    cvs = CvAggregateStore.list_by_owner(DEMO_USER_ID)
    assert len(cvs) == 2
    assert sum(cv.is_primary for cv in cvs) == 1


def test_render_cv_writes_html(app, make_payload, tmp_path):
    cv = CvAggregateStore.create("user-1", make_payload())
    output = tmp_path / "out" / "cv.html"

    result = app.test_cli_runner().invoke(
        args=["render-cv", str(cv.id), "user-1", "--format", "html", "--template", "Classic", "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "PROFESSIONAL SUMMARY" in output.read_text(encoding="utf-8")


def test_render_cv_unknown_cv_fails(app):
    result = app.test_cli_runner().invoke(args=["render-cv", "999", "user-1", "--format", "html"])

    assert result.exit_code != 0
    assert "not found" in result.output
