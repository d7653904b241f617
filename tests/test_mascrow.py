import re

import pytest

from sentinel.services.mascrow import compute_fingerprint, verify_fingerprint

CORPUS = [
    "https://pay.example.com/invoice/42",
    "upi://pay?pa=merchant@bank&am=100",
    "WIFI:T:WPA;S:office;P:hunter2;;",
    "Hello world",
]


def test_known_values():
    assert compute_fingerprint("") == "hash_0"
    assert compute_fingerprint("a") == "hash_61"
    assert compute_fingerprint("ab") == "hash_c21"


def test_hashes_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert compute_fingerprint("\U0001F600") == "hash_1b0d63"


@pytest.mark.parametrize("content", CORPUS)
def test_deterministic_and_verifiable(content):
    first = compute_fingerprint(content)
    assert first == compute_fingerprint(content)
    assert re.fullmatch(r"hash_[0-9a-f]+", first)
    assert verify_fingerprint(first, content)


def test_salt_changes_fingerprint():
    content = CORPUS[0]
    salted = compute_fingerprint(content, salt="s1")
    assert salted != compute_fingerprint(content)
    assert salted == compute_fingerprint(content, salt="s1")
    assert verify_fingerprint(salted, content, salt="s1")
    assert not verify_fingerprint(salted, content)


@pytest.mark.parametrize("content", CORPUS)
def test_single_character_mutation_detected(content):
    original = compute_fingerprint(content)
    for i, ch in enumerate(content):
        replacement = "x" if ch != "x" else "y"
        mutated = content[:i] + replacement + content[i + 1:]
        assert compute_fingerprint(mutated) != original, (i, mutated)


def test_verify_rejects_missing_or_wrong():
    assert not verify_fingerprint(None, "Hello world")
    assert not verify_fingerprint("hash_deadbeef", "Hello world")


def test_long_content_wraps_to_32_bits():
    fp = compute_fingerprint("z" * 10_000)
    assert int(fp[len("hash_"):], 16) <= 0x80000000


def test_lone_surrogate_hashes_as_code_unit():
    assert compute_fingerprint("\ud800") == "hash_d800"
    content = "pay \ud800 here"
    assert verify_fingerprint(compute_fingerprint(content), content)


def test_qr_with_lone_surrogate_is_scored():
    from sentinel.services.analyzer import analyze_qr

    out = analyze_qr("pay \ud800 here", "hash_1")
    assert out.rules == ["fingerprint_mismatch"]
    assert 0.0 <= out.score <= 1.0
