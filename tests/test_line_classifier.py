"""
Tests for the line classifier — which lines are ## block lines.
"""

import pytest

from scriptmeta.core.services.script_meta.line_classifier import classify_line


class TestClassifyLine:
    def test_plain_text_is_not_block(self):
        assert classify_line("import requests") is None

    def test_single_hash_comment_is_not_block(self):
        assert classify_line("# just a comment") is None

    def test_indented_marker_is_not_block(self):
        assert classify_line("  ## Script Dependencies:") is None
        assert classify_line("\t## requests") is None

    def test_empty_line_is_not_block(self):
        assert classify_line("") is None

    def test_marker_payload_is_trimmed(self):
        line = classify_line("##    requests  \n")
        assert line is not None
        assert line.payload == "requests"

    def test_interior_whitespace_preserved(self):
        line = classify_line("## rich >= 13.0 ;  python_version < '3.12'\r\n")
        assert line is not None
        assert line.payload == "rich >= 13.0 ;  python_version < '3.12'"

    def test_bare_marker_has_empty_payload(self):
        line = classify_line("##\n")
        assert line is not None
        assert line.payload == ""

    @pytest.mark.parametrize("text, payload", [
        ("###", "#"),
        ("### heading", "# heading"),
        ("####X-Thing:", "##X-Thing:"),
    ])
    def test_extra_markers_belong_to_payload(self, text, payload):
        line = classify_line(text)
        assert line is not None
        assert line.payload == payload
