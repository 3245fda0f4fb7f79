#!/usr/bin/env python3
"""
Tests for the command line front end.
"""

import json

from sword_reader.cli import main


def test_parse_local_file(tmp_path, capsys, make_client):
    latex = tmp_path / "genesis.tex"
    latex.write_text(
        r"\swordchapter{Gen.1}{Genesis 1}{0}\swordverse{a}{b}{1}In the beginning",
        encoding="utf-8",
    )
    client, session = make_client()

    assert main(["parse", str(latex)], client=client) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["nodes"][1]["text"] == "In the beginning"
    assert session.calls == []


def test_parse_local_file_as_html(tmp_path, capsys, make_client):
    latex = tmp_path / "verse.tex"
    latex.write_text("H0430 said", encoding="utf-8")
    client, _ = make_client()

    assert main(["parse", str(latex), "--html"], client=client) == 0
    assert 'data-strong="430"' in capsys.readouterr().out


def test_parse_missing_file_reports_error(tmp_path, capsys, make_client):
    client, session = make_client()

    assert main(["parse", str(tmp_path / "missing.tex")], client=client) == 1
    assert "❌ Cannot read" in capsys.readouterr().out
    assert session.calls == []


def test_chapter_not_found(capsys, make_client, response):
    client, _ = make_client(response({"result": ""}))

    assert main(["chapter", "Nowhere", "1", "-m", "KJV"], client=client) == 1
    assert "Nothing found" in capsys.readouterr().out


def test_search_prints_references(capsys, make_client, response):
    client, session = make_client(response({"result": "Matthew 5:8 ; Psalms 24:4"}))

    assert main(["search", "pure in heart", "--module", "ESV"], client=client) == 0
    assert capsys.readouterr().out.splitlines() == ["Matthew 5:8", "Psalms 24:4"]
    assert session.calls[0]["params"]["module"] == "ESV"


def test_xrefs_with_no_results(capsys, make_client, response):
    client, _ = make_client(response({"raw_html": ""}))

    assert main(["xrefs", "John 3:16"], client=client) == 0
    assert capsys.readouterr().out.strip() == "No cross-references found."


def test_strongs_with_pairs(capsys, make_client, response):
    client, _ = make_client(
        response({"parsed": {"entry": "430", "word": "elohim", "transliteration": "",
                             "definition": "God"}}),
        response({"raw_html": "elohim 2316 theos<br>(HebrewGreek)"}),
    )

    assert main(["strongs", "00430", "--pairs"], client=client) == 0
    out = capsys.readouterr().out
    assert '"code": 430' in out
    assert "elohim → G2316 theos" in out


def test_api_errors_exit_with_1(capsys, make_client, response):
    client, _ = make_client(response(status_code=404))

    assert main(["strongs", "9", "-n", "Greek"], client=client) == 1
    assert "No entry for 00009 (Greek)" in capsys.readouterr().out


def test_invalid_code_exits_with_1(capsys, make_client):
    client, _ = make_client()

    assert main(["strongs", "abc"], client=client) == 1
    assert "Error" in capsys.readouterr().out
