import pytest

from affordances.models.verbs import HttpVerb, is_mutating, is_required, normalize_verb, verb_name


@pytest.mark.parametrize("verb", ["POST", "PUT", HttpVerb.POST, "put"])
def test_post_and_put_require_input(verb):
    assert is_required(verb) is True


@pytest.mark.parametrize("verb", ["PATCH", "GET", "DELETE", "HEAD", "OPTIONS", "TRACE", "PURGE", ""])
def test_other_verbs_do_not_require_input(verb):
    assert is_required(verb) is False


def test_mutating_verbs():
    assert {v for v in HttpVerb if is_mutating(v)} == {HttpVerb.POST, HttpVerb.PUT, HttpVerb.PATCH}
    assert is_mutating("propfind") is False


def test_normalize_known_and_unknown_verbs():
    assert normalize_verb(" patch ") is HttpVerb.PATCH
    assert normalize_verb("propfind") == "PROPFIND"
    assert verb_name(HttpVerb.DELETE) == "DELETE"
    assert verb_name("link") == "LINK"
    assert str(HttpVerb.GET) == "GET"
