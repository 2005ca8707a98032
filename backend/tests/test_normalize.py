from app.utils.normalize import normalize_email, normalize_name, phone_digits


def test_normalize_name():
    assert normalize_name("  Jane DOE ") == "jane doe"
    assert normalize_name(None) == ""


def test_normalize_email():
    assert normalize_email(" Jane@Example.COM ") == "jane@example.com"
    assert normalize_email("   ") is None
    assert normalize_email(None) is None


def test_phone_digits():
    assert phone_digits("(555) 123-4567") == "5551234567"
    assert phone_digits("+1 555.123.4567") == "15551234567"
    assert phone_digits("n/a") is None
    assert phone_digits(None) is None
