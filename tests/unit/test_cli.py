# tests/unit/test_cli.py
"""
Unit tests for the influence-map CLI.
"""

import json

import pytest

from bias_review.cli.influence_map import main

ARTICLE = {
    "id": "a1",
    "headline": "Deal struck",
    "content": "Officials described the deal as a historic betrayal of allies.",
    "biasExplanation": 'FRAMING The report called it a "historic betrayal" by officials.',
    "behaviouralAnalysis": "",
}


@pytest.fixture
def article_path(tmp_path):
    path = tmp_path / "article.json"
    path.write_text(json.dumps(ARTICLE), encoding="utf-8")
    return str(path)


class TestRenderCommand:
    """Tests for `render`."""

    def test_json_output(self, article_path, capsys):
        main(["render", article_path])

        data = json.loads(capsys.readouterr().out)
        assert data["highlight_count"] == 1
        assert "".join(s["text"] for s in data["segments"]) == ARTICLE["content"]

    def test_html_output(self, article_path, capsys):
        main(["render", article_path, "--html"])

        out = capsys.readouterr().out
        assert ">historic betrayal</mark>" in out

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["render", str(tmp_path / "missing.json")])

        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_article(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"content": "no id"}), encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["render", str(path)])

        assert exc.value.code == 1


class TestCategoriesCommand:
    """Tests for `categories`."""

    def test_lists_headers(self, capsys):
        main(["categories"])

        out = capsys.readouterr().out
        assert "FRAMING" in out
        assert "MOTIVATION & ACTION SIGNALS" in out
        assert "FLAGGED" in out
