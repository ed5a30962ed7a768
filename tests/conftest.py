import pytest

from app.config import get_settings

HEADER = "Rank,Navn,Kategori,Adresse,Kjede,Omsetning,YoY-vekst,Ansatte,Markedsandel"

ACME = (
    'A;foo,"Acme",,,,"NOK 88 mill.\n\n0.5% av kjede","-4%\n\n(%)",'
    '"0\n\n28 i 227 lokasjoner","7.53%\n\ni området"'
)

BAKERI = (
    '2,"Bakeriet, Grünerløkka",Kafé,Thorvald Meyers gate 2,Nei,'
    '"NOK 12 mill.\n\n1.2% av kjede","12.5%\n\n(%)","9\n\n9 i 1 lokasjoner","2%\n\ni området"'
)


@pytest.fixture
def sample_csv():
    return "\n".join([HEADER, ACME, "3,Kort,rad,uten,nok", BAKERI]) + "\n"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for var in ("REPORT_LOG_LEVEL", "REPORT_OUTPUT_DIR", "REPORT_CONTACT", "REPORT_IMAGE_ROOT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
