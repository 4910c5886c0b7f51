"""Tests for the text utility codecs."""

import json

import pytest

from syntax_shift.errors import MalformedToken, ParseError
from syntax_shift.registry import SAMPLES_BY_SOURCE
from syntax_shift.text_codecs import base64_decode, base64_encode, jwt_decode, rot13, url_decode, url_encode


# ---------------------------------------------------------------------------
# Base64
# ---------------------------------------------------------------------------

def test_base64_encode():
    assert base64_encode("Hello, SyntaxShift!") == "SGVsbG8sIFN5bnRheFNoaWZ0IQ=="

def test_base64_is_utf8_based():
    assert base64_encode("héllo ✓") == "aMOpbGxvIOKckw=="
    assert base64_decode("aMOpbGxvIOKckw==") == "héllo ✓"

def test_base64_decode_tolerates_whitespace_and_missing_padding():
    assert base64_decode(" SGVs\nbG8 ") == "Hello"
    assert base64_decode("SGVsbG8") == "Hello"

@pytest.mark.parametrize("text", ["!!!!", "/w=="])
def test_base64_decode_rejects_garbage(text):
    with pytest.raises(ParseError):
        base64_decode(text)


# ---------------------------------------------------------------------------
# URL
# ---------------------------------------------------------------------------

def test_url_encode_matches_uri_component_rules():
    assert url_encode("Hello, SyntaxShift!") == "Hello%2C%20SyntaxShift!"
    assert url_encode("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
    assert url_encode("(*'~_.-)") == "(*'~_.-)"
    assert url_encode("✓") == "%E2%9C%93"

def test_url_decode():
    assert url_decode("Hello%2C%20SyntaxShift!") == "Hello, SyntaxShift!"
    assert url_decode("%E2%9C%93") == "✓"

def test_url_decode_rejects_broken_utf8():
    with pytest.raises(ParseError):
        url_decode("%E0%A4")

@pytest.mark.parametrize("text", ["100%zz", "%", "abc%2", "%G1"])
def test_url_decode_rejects_malformed_escapes(text):
    with pytest.raises(ParseError, match="malformed escape"):
        url_decode(text)

def test_url_decode_literal_percent_escape():
    assert url_decode("100%25") == "100%"


# ---------------------------------------------------------------------------
# ROT13
# ---------------------------------------------------------------------------

def test_rot13():
    assert rot13("Hello, SyntaxShift!") == "Uryyb, FlagnkFuvsg!"

def test_rot13_is_its_own_inverse():
    text = "The Quick Brown Fox, 123 ✓"
    assert rot13(rot13(text)) == text


# ---------------------------------------------------------------------------
# JWT
# ---------------------------------------------------------------------------

def test_jwt_decode_sample():
    decoded = json.loads(jwt_decode(SAMPLES_BY_SOURCE["JWT"]))
    assert decoded["header"] == {"alg": "HS256", "typ": "JWT"}
    assert decoded["payload"] == {"sub": "1234567890", "name": "SyntaxShift", "iat": 1516239022}
    assert decoded["signature"] == "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"

def test_jwt_output_is_indented():
    output = jwt_decode(SAMPLES_BY_SOURCE["JWT"])
    assert output.startswith('{\n  "header": {\n    "alg": "HS256"')

@pytest.mark.parametrize("token", ["a.b", "a.b.c.d", "", "abc.def.ghi"])
def test_jwt_decode_rejects_malformed_tokens(token):
    with pytest.raises(MalformedToken):
        jwt_decode(token)
