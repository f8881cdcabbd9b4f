import hashlib

from ghswitch.lib.hashing import FINGERPRINT_LENGTH, fingerprint, sha256


def test_sha256_full_hash():
    content = "test string"
    expected_hash = hashlib.sha256(content.encode()).hexdigest()
    assert sha256(content) == expected_hash


def test_sha256_truncated_hash_16_chars():
    content = "yet another test string with more content"
    expected_hash = hashlib.sha256(content.encode()).hexdigest()[:16]
    assert sha256(content, 16) == expected_hash


def test_fingerprint_reference_value():
    fp = fingerprint("abc")
    assert fp == "ba7816bf8f01cfea"
    assert len(fp) == FINGERPRINT_LENGTH


def test_fingerprint_is_stable():
    token = "ghp_exampleexampleexample"
    assert fingerprint(token) == fingerprint(token)
    assert fingerprint(token) != fingerprint(token + "x")


def test_fingerprint_empty_and_unicode():
    assert fingerprint("") == hashlib.sha256(b"").hexdigest()[:16]
    assert fingerprint("你好世界") == hashlib.sha256("你好世界".encode()).hexdigest()[:16]
