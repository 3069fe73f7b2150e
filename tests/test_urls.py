"""Tests for arXiv link normalization."""

import pytest

from paperscope.parsers.urls import normalize_url


def test_abstract_url_becomes_secure_pdf():
    assert normalize_url("http://arxiv.org/abs/1234.5678") == "https://arxiv.org/pdf/1234.5678.pdf"


def test_pdf_url_only_gets_secure_scheme():
    assert normalize_url("http://arxiv.org/pdf/1234.5678") == "https://arxiv.org/pdf/1234.5678"


def test_versioned_abstract_url():
    assert normalize_url("http://arxiv.org/abs/2301.12345v2") == (
        "https://arxiv.org/pdf/2301.12345v2.pdf"
    )


def test_secure_abstract_url():
    assert normalize_url("https://arxiv.org/abs/cs/0001001") == (
        "https://arxiv.org/pdf/cs/0001001.pdf"
    )


def test_unrecognized_url_keeps_path():
    assert normalize_url("http://example.org/paper/42") == "https://example.org/paper/42"


def test_secure_url_is_untouched():
    assert normalize_url("https://arxiv.org/pdf/1234.5678") == "https://arxiv.org/pdf/1234.5678"


def test_empty_string():
    assert normalize_url("") == ""


@pytest.mark.parametrize(
    "raw",
    [
        "http://arxiv.org/abs/1234.5678",
        "http://arxiv.org/pdf/1234.5678",
        "https://arxiv.org/abs/1234.5678v3",
        "http://export.arxiv.org/abs/hep-th/9901001",
        "ftp://example.org/file",
        "http://example.org/?next=http://arxiv.org/",
        "",
    ],
)
def test_normalization_is_idempotent(raw):
    once = normalize_url(raw)

    assert normalize_url(once) == once
