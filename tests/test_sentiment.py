from talkhis.sentiment import analyze_sentiment, get_sentiment_label


def test_english_positive_and_negative():
    assert get_sentiment_label(analyze_sentiment("I love this wonderful product, it is great.").score) == "positive"
    assert get_sentiment_label(analyze_sentiment("This is a terrible, awful and sad failure.").score) == "negative"


def test_arabic_lexicon():
    assert get_sentiment_label(analyze_sentiment("النجاح رائع والنتيجة ممتازة").score) == "positive"
    assert get_sentiment_label(analyze_sentiment("فشل المشروع وهذه مشكلة كبيرة").score) == "negative"


def test_empty_is_neutral():
    result = analyze_sentiment("")
    assert result.score == 0
    assert get_sentiment_label(result.score) == "neutral"
