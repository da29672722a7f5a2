#!/usr/bin/env python3
"""
Unit tests for the SSML helpers.
"""
import re

from utils.ssml import escape, normalize, ssml, unescape


def test_escape_replaces_markup_characters():
    """Test that every markup character becomes an entity"""
    text = 'Tom & "Jerry" <3 > 2'
    escaped = escape(text)

    assert escaped == "Tom &amp; &quot;Jerry&quot; &lt;3 &gt; 2"
    assert re.search(r'[<>"]', escaped) is None
    assert re.search(r"&(?!amp;|lt;|gt;|quot;)", escaped) is None


def test_unescape_recovers_original():
    """Test that unescape() reverses escape(), even for entity-like text"""
    for text in ['"1 + 1 > 1"', "a < b && c", "&lt; is already escaped", "&amp;quot;", ""]:
        assert unescape(escape(text)) == text


def test_normalize_collapses_whitespace():
    """Test that whitespace runs collapse and hug the tags"""
    markup = """
        <speak>
          Hello   there
          <break time="500ms"/>
          friend.
        </speak>
    """
    assert normalize(markup) == '<speak>Hello there<break time="500ms"/>friend.</speak>'


def test_normalize_leaves_no_space_around_tags():
    markup = normalize("  <a>  x  <b/>\t\ty </a> ")
    assert " <" not in markup
    assert "> " not in markup
    assert "  " not in markup


def test_ssml_escapes_values():
    """Test the rendering example from the module docstring"""
    template = """
      <speak>
        {equation}
      </speak>
    """
    assert ssml(template, equation='"1 + 1 > 1"') == "<speak>&quot;1 + 1 &gt; 1&quot;</speak>"


def test_ssml_does_not_escape_template():
    rendered = ssml('<speak>Wind <break time="1s"/> {wind}</speak>', wind=5)
    assert rendered == '<speak>Wind<break time="1s"/>5</speak>'
