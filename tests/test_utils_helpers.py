import pytest

from qrsignal.utils.domains import host_matches, normalize_host, registered_domain
from qrsignal.utils.urls import MalformedUrlError, parse_strict_url


def test_normalize_host_lowercases_and_strips_root_dot():
    assert normalize_host(" Example.COM. ") == "example.com"


def test_host_matches_exact_and_subdomain():
    assert host_matches("bit.ly", ["bit.ly"]) == "bit.ly"
    assert host_matches("go.bit.ly", ["bit.ly"]) == "bit.ly"


def test_host_matches_respects_label_boundaries():
    assert host_matches("microsoft.com", ["t.co"]) is None
    assert host_matches("notbit.ly", ["bit.ly"]) is None


def test_host_matches_returns_first_entry():
    assert host_matches("checkout.stripe.com", ["stripe.com", "checkout.stripe.com"]) == "stripe.com"


def test_host_matches_empty_host():
    assert host_matches("", ["bit.ly"]) is None


def test_registered_domain_uses_public_suffix():
    assert registered_domain("www.example.co.uk") == "example.co.uk"
    assert registered_domain("a.b.example.com") == "example.com"


def test_registered_domain_falls_back_to_host():
    assert registered_domain("localhost") == "localhost"
    assert registered_domain("") == ""


def test_parse_strict_url_parts():
    url = parse_strict_url("HTTPS://Example.com:8443/A/b%20c/?utm_source=x&b=&utm_source=y#frag")
    assert url.scheme == "https"
    assert url.host == "example.com"
    assert url.port == 8443
    assert url.path_segments == ["a", "b c"]
    assert url.param_names == ["utm_source", "b", "utm_source"]


def test_parse_strict_url_idn_host():
    url = parse_strict_url("https://bücher.de/katalog")
    assert url.host == "xn--bcher-kva.de"


def test_parse_strict_url_ipv6_host():
    url = parse_strict_url("http://[::1]:8080/")
    assert url.host == "::1"
    assert url.port == 8080


@pytest.mark.parametrize(
    "payload",
    [
        "https://",
        "https:///path",
        "http://[::1",
        "http://[not-an-ip]/",
        "https://example.com:99999/",
        "https://example.com:port/",
        "https://exa mple.com/",
        "https://exa%zzmple.com/",
        "https://exa%2Fmple.com/",
        "https://.../",
        "example.com/no-scheme",
        "",
    ],
)
def test_parse_strict_url_rejects_malformed(payload):
    with pytest.raises(MalformedUrlError):
        parse_strict_url(payload)


def test_parse_strict_url_scheme_allowlist():
    with pytest.raises(MalformedUrlError):
        parse_strict_url("ftp://example.com/", schemes=("http", "https"))
    assert parse_strict_url("market://details?id=x", schemes=("market",)).host == "details"


def test_parse_strict_url_decodes_percent_escaped_host():
    assert parse_strict_url("https://bit%2Ely/x").host == "bit.ly"
    assert parse_strict_url("https://EXA%41MPLE.com/").host == "exaample.com"
