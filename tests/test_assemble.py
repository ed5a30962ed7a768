import json

import pytest

from app.assemble import assemble_document
from app.models import Actor, Property, Record
from app.storage import ReportNotFoundError, document_json, read_report, write_document

NOW = "2026-01-02T03:04:05.000Z"
ACME = Record(name="Acme", revenue=88.0, year_over_year_growth=-4.0, employee_count=0, market_share=7.53)


def test_document_scaffold():
    doc = assemble_document(Property(id="thorvald-meyers-gate-2", name="Thorvald Meyers gate 2"), [ACME], now=NOW)

    assert doc.description == "Placeanalyse for Thorvald Meyers gate 2"
    assert doc.hero_image == "/images/plaace/thorvald-meyers-gate-2/hero.jpg"
    assert doc.map_image == "/images/plaace/thorvald-meyers-gate-2/map.png"
    assert doc.actors == [Actor.from_record(ACME)]
    assert doc.report_data.report_date == NOW
    assert [s.filename for s in doc.report_data.screenshots] == [
        "nokkeldata", "korthandel", "konkurransebildet", "demografi", "bevegelse", "besokende",
    ]
    assert doc.report_data.screenshots[0].path.endswith("nokkeldata.jpg")
    assert doc.report_data.key_figures.population is None
    assert doc.extra_info.history == "Eiendom i Thorvald Meyers gate 2"
    assert doc.extra_info.contact == "Eiendomsspar"
    assert doc.metadata.created == doc.metadata.last_updated == NOW
    assert doc.metadata.version == 1


def test_key_figures_png_for_nedre_foss():
    doc = assemble_document(Property(id="nedre-foss-gard", name="Nedre Foss Gård"), [], now=NOW)
    assert doc.report_data.screenshots[0].path == "/images/plaace/nedre-foss-gard/nokkeldata.png"
    assert doc.report_data.screenshots[1].path == "/images/plaace/nedre-foss-gard/korthandel.jpg"


def test_settings_used(monkeypatch):
    monkeypatch.setenv("REPORT_CONTACT", "Forvalter AS")
    monkeypatch.setenv("REPORT_IMAGE_ROOT", "/static/img/")

    doc = assemble_document(Property(id="p", name="P"), [], now=NOW)
    assert doc.extra_info.contact == "Forvalter AS"
    assert doc.hero_image == "/static/img/p/hero.jpg"


def test_document_json_keys():
    doc = assemble_document(Property(id="p", name="P"), [ACME], now=NOW)
    data = json.loads(document_json(doc))

    assert list(data) == [
        "id", "adresse", "beskrivelse", "heroImage", "mapImage",
        "aktorer", "plaaceData", "tilleggsinfo", "metadata",
    ]
    assert data["aktorer"][0] == {
        "navn": "Acme",
        "omsetning": 88.0,
        "yoyVekst": -4.0,
        "ansatte": 0,
        "markedsandel": 7.53,
    }
    assert data["plaaceData"]["nokkeldata"]["prisniva"] is None
    assert data["tilleggsinfo"]["notater"] == []
    assert data["metadata"]["sistOppdatert"] == NOW


def test_write_document(tmp_path):
    doc = assemble_document(Property(id="nedre-foss-gard", name="Nedre Foss Gård"), [ACME], now=NOW)
    out = write_document(doc, tmp_path / "eiendommer")

    assert out == tmp_path / "eiendommer" / "nedre-foss-gard.json"
    text = out.read_text(encoding="utf-8")
    assert "Nedre Foss Gård" in text
    assert json.loads(text)["aktorer"][0]["navn"] == "Acme"


def test_read_report(tmp_path, sample_csv):
    path = tmp_path / "sheet.csv"
    path.write_bytes(sample_csv.replace("\n", "\r\n").encode("utf-8"))

    text, decoding = read_report(path)
    assert text == sample_csv
    assert decoding["newlines"]["changed"] is True


def test_read_missing_report(tmp_path):
    with pytest.raises(ReportNotFoundError):
        read_report(tmp_path / "missing.csv")
