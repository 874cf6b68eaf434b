"""Testy wyszukiwania wzorców w tekście."""

from __future__ import annotations

from file_inspector.text_analysis import analyze_text, detect_encodings, find_text_patterns


def test_find_text_patterns_extracts_urls_and_emails() -> None:
    patterns = find_text_patterns("contact me at a@b.com or http://x.com")

    assert patterns.emails == ["a@b.com"]
    assert patterns.urls == ["http://x.com"]
    assert patterns.ip_addresses == []
    assert patterns.base64_strings == []


def test_find_text_patterns_keeps_order_and_duplicates() -> None:
    text = "https://one.example/a http://two.example https://one.example/a"
    assert find_text_patterns(text).urls == [
        "https://one.example/a",
        "http://two.example",
        "https://one.example/a",
    ]


def test_ip_addresses_are_not_range_checked() -> None:
    patterns = find_text_patterns("hosts: 10.0.0.1, 999.999.999.999")
    assert patterns.ip_addresses == ["10.0.0.1", "999.999.999.999"]


def test_base64_tokens_require_32_characters() -> None:
    token = "QUJD" * 8 + "=="
    patterns = find_text_patterns(f"short QUJD and long {token} end")
    assert patterns.base64_strings == [token]


def test_pattern_set_serialises_every_category() -> None:
    assert find_text_patterns("").to_dict() == {
        "urls": [],
        "emails": [],
        "ipAddresses": [],
        "base64Strings": [],
    }


def test_detect_encodings_base64() -> None:
    assert detect_encodings("aGVsbG8gd29ybGQ=") == ["base64"]


def test_detect_encodings_heuristics_are_not_exclusive() -> None:
    assert detect_encodings("deadbeef") == ["base64", "hex"]


def test_detect_encodings_url_encoded_prefix() -> None:
    assert detect_encodings("%41%42 and more") == ["url-encoded"]
    assert detect_encodings("plain %41") == []


def test_analyze_text_counts_length_and_lines() -> None:
    text = "first line\nsecond line\n"

    report = analyze_text(text)

    assert report.length == len(text)
    assert report.lines == 3
    assert report.to_dict()["possibleEncodings"] == []
