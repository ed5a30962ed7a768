from app.normalize import decode_report_bytes


def test_latin1_is_decoded():
    raw = "Navn,By\nKafé Nord,Montréal\n".encode("latin-1")
    text, report = decode_report_bytes(raw)
    assert "Montréal" in text
    assert report["decode_fallback"] is False


def test_crlf_normalized_to_lf():
    text, report = decode_report_bytes(b'a,b\r\n1,"x\r\ny"\r\n')
    assert text == 'a,b\n1,"x\ny"\n'
    assert report["newlines"]["before"]["crlf"] == 3
    assert report["newlines"]["changed"] is True


def test_lone_cr_normalized():
    text, report = decode_report_bytes(b"a\rb\n")
    assert text == "a\nb\n"
    assert report["newlines"]["before"] == {"crlf": 0, "cr": 1, "lf": 1}


def test_lf_input_unchanged():
    text, report = decode_report_bytes(b"a,b\nc,d\n")
    assert text == "a,b\nc,d\n"
    assert report["newlines"]["changed"] is False


def test_utf8_bom_dropped():
    text, report = decode_report_bytes("\ufeffNavn,Omsetning\nAcme,NOK 88\n".encode("utf-8"))
    assert text.startswith("Navn")
    assert report["decode_used"] == "utf-8-sig"


def test_empty_bytes():
    text, _ = decode_report_bytes(b"")
    assert text == ""
