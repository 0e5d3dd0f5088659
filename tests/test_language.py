from talkhis.language import detect_language, get_language_name


def test_arabic_script_is_arabic():
    result = detect_language("هذا نص باللغة العربية")
    assert result.language == "ar"
    assert result.confidence == 0.9


def test_english_text():
    text = "This is a longer paragraph written in plain English about the weather and the city."
    assert detect_language(text).language == "en"


def test_empty_defaults_to_english():
    assert detect_language("").language == "en"


def test_language_names():
    assert get_language_name("ar") == "Arabic"
    assert get_language_name("en") == "English"
    assert get_language_name("xx") == "Unknown"
