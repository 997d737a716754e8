"""
Unit tests for the content sanitizer.
"""

import pytest

from gatekeeper.validation.sanitizer import sanitize_content, sanitize_text


class TestSanitizeText:
    """Test markup stripping on single strings."""

    def test_plain_text_unchanged(self):
        assert sanitize_text("Välkommen till kommunen!") == "Välkommen till kommunen!"

    def test_script_block_removed(self):
        assert sanitize_text('Hello <script>alert("xss")</script> world') == "Hello  world"

    def test_script_block_case_and_newlines(self):
        text = 'Hi<SCRIPT type="text/javascript">\nsteal()\n</Script >there'

        assert sanitize_text(text) == "Hithere"

    def test_iframe_removed(self):
        assert sanitize_text('<iframe src="http://evil"></iframe>Safe') == "Safe"

    def test_javascript_uri_removed(self):
        assert sanitize_text("JavaScript:alert(1)") == "alert(1)"

    def test_event_handler_removed(self):
        result = sanitize_text('<img src=x onerror="alert(1)">')

        assert "onerror" not in result
        assert result == '<img src=x "alert(1)">'

    def test_event_handler_with_spaces(self):
        assert "onclick" not in sanitize_text("<a onclick = 'x'>")

    def test_event_handler_after_word_character_removed(self):
        result = sanitize_text("<img src=x _onerror=alert(1)> xonclick=go()")

        assert result == "<img src=x _alert(1)> xgo()"
        assert "onerror" not in result
        assert "onclick" not in result

    def test_whitespace_trimmed(self):
        assert sanitize_text("  padded  ") == "padded"

    def test_nested_payload_fully_removed(self):
        """Removing one layer must not leave a new payload behind."""
        assert "javascript:" not in sanitize_text("javajavascript:script:alert(1)").lower()
        assert "<script" not in sanitize_text("<scr<script>x</script>ipt>y</script>").lower()

    @pytest.mark.parametrize("text", [
        "Привет мир",
        "你好世界",
        "مرحبا بالعالم",
        "🎮🎯🏆",
        "é",
        "‮right-to-left",
        "zero​width",
        'Test","malicious":true,"override":"',
        "{braces} [brackets] 'quotes'",
    ])
    def test_other_characters_preserved(self, text):
        assert sanitize_text(text) == text

    def test_idempotent(self):
        text = ' <script>x</script> onload= javascript:go() '
        once = sanitize_text(text)

        assert sanitize_text(once) == once


class TestSanitizeContent:
    """Test deep sanitization of structured content."""

    def test_nested_strings_sanitized(self):
        content = {
            "title": "<script>x</script>Quiz",
            "scenes": [{"text": "javascript:go()", "points": 10}],
        }

        result = sanitize_content(content)

        assert result == {"title": "Quiz", "scenes": [{"text": "go()", "points": 10}]}

    def test_input_not_mutated(self):
        content = {"title": "<script>x</script>Quiz", "tags": ["onclick=a"]}

        sanitize_content(content)

        assert content == {"title": "<script>x</script>Quiz", "tags": ["onclick=a"]}

    def test_returns_copy(self):
        content = {"items": [1, 2]}

        result = sanitize_content(content)

        assert result == content
        assert result is not content
        assert result["items"] is not content["items"]

    def test_keys_and_scalars_unchanged(self):
        content = {"<script>key</script>": True, "n": None, "f": 1.5}

        assert sanitize_content(content) == content
