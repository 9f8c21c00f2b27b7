"""Tests for the text normalizer and plain-text projection."""

from bs4 import BeautifulSoup

from bdic.extractors.text import normalize, plain_text, select_text


class TestNormalize:

    def test_collapses_and_trims(self):
        assert normalize("  a   b\n c ") == "a b c"

    def test_idempotent(self):
        once = normalize("\t hello    world\n")
        assert once == "hello world"
        assert normalize(once) == once

    def test_strips_zero_width_artifacts(self):
        assert normalize("\ufeff\u200bhello\u200b ") == "hello"

    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize(" \n\t ") == ""


class TestPlainText:

    def test_flattens_inline_markup(self):
        soup = BeautifulSoup("<p>Say <b>hello</b> <span class='x'><i>there</i></span></p>", "lxml")
        assert plain_text(soup.p) == "Say hello there"

    def test_exclude_skips_subtree(self):
        soup = BeautifulSoup("<li><p>Text <span class='via'>Collins</span>.</p></li>", "lxml")
        assert plain_text(soup.li, exclude=".via") == "Text ."

    def test_does_not_mutate_tree(self):
        soup = BeautifulSoup("<li><p>Text <span class='via'>Collins</span></p></li>", "lxml")
        before = str(soup)
        plain_text(soup.li, exclude=".via")
        assert str(soup) == before
        assert soup.select_one(".via") is not None

    def test_ignores_comments_and_scripts(self):
        soup = BeautifulSoup("<div>a<!-- note --><script>var x;</script>b</div>", "lxml")
        assert plain_text(soup.div) == "ab"

    def test_select_text_concatenates_matches(self):
        soup = BeautifulSoup("<div><i class='w'>a</i><i class='w'>b</i></div>", "lxml")
        assert select_text(soup, ".w") == "ab"
        assert select_text(soup, ".missing") == ""

