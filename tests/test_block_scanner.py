"""
Tests for the block scanner — grouping ## lines into typed blocks.
"""

import pytest

from scriptmeta.core.services.script_meta.block_scanner import parse_header, scan_blocks


class TestParseHeader:
    def test_type_and_empty_extra(self):
        assert parse_header("Script Dependencies:") == ("Script Dependencies", "")

    def test_extra_kept_as_is(self):
        assert parse_header("X-Custom: v1") == ("X-Custom", " v1")

    def test_splits_on_first_colon(self):
        assert parse_header("X-Url: http://example.com") == ("X-Url", " http://example.com")

    @pytest.mark.parametrize("payload", [
        "Not Dependencies",
        "Script Dependencies :",
        "Script Dependencies\t:",
        ":",
        ": extra",
        "",
    ])
    def test_not_a_header(self, payload):
        assert parse_header(payload) is None


class TestScanBlocks:
    def test_no_marker_lines_yield_nothing(self):
        lines = ["import os", "# comment", "", "print('hi')"]
        assert list(scan_blocks(lines)) == []

    def test_end_to_end_dependency_block(self):
        lines = [
            "# intro",
            "## Script Dependencies:",
            "##    requests",
            "##    rich",
            "",
            "import requests",
        ]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 1
        block = blocks[0]
        assert block.block_type == "Script Dependencies"
        assert block.header_extra == ""
        assert block.body_lines == ("requests", "rich")
        assert block.lineno == 2
        assert block.body_linenos == (3, 4)

    def test_block_runs_to_end_of_input(self):
        blocks = list(scan_blocks(["## X-Custom: v1", "## some-data"]))
        assert len(blocks) == 1
        assert blocks[0].block_type == "X-Custom"
        assert blocks[0].header_extra == " v1"
        assert blocks[0].body_lines == ("some-data",)

    def test_header_only_block(self):
        blocks = list(scan_blocks(["## Script Dependencies:", "import os"]))
        assert len(blocks) == 1
        assert blocks[0].body_lines == ()

    def test_blank_block_lines_dropped_not_terminating(self):
        lines = [
            "## Script Dependencies:",
            "## requests",
            "##",
            "##    ",
            "## rich",
        ]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 1
        assert blocks[0].body_lines == ("requests", "rich")
        assert blocks[0].body_linenos == (2, 5)

    def test_header_without_colon_never_starts_block(self):
        assert list(scan_blocks(["## Not Dependencies", "## requests"])) == []

    def test_scan_resumes_on_next_line_after_bad_header(self):
        lines = ["## no colon here", "## Script Dependencies:", "## requests"]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 1
        assert blocks[0].block_type == "Script Dependencies"
        assert blocks[0].lineno == 2
        assert blocks[0].body_lines == ("requests",)

    def test_whitespace_before_colon_never_starts_block(self):
        assert list(scan_blocks(["## Script Dependencies :", "## requests"])) == []

    def test_gap_terminates_block(self):
        lines = [
            "## Script Dependencies:",
            "## requests",
            "x = 1",
            "## rich",
        ]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 1
        assert blocks[0].body_lines == ("requests",)

    def test_gap_then_new_header_starts_new_block(self):
        lines = [
            "## Script Dependencies:",
            "## requests",
            "",
            "## X-Tool: settings",
            "## key = value",
        ]
        blocks = list(scan_blocks(lines))
        assert [b.block_type for b in blocks] == ["Script Dependencies", "X-Tool"]
        assert blocks[1].body_lines == ("key = value",)
        assert blocks[1].lineno == 4

    def test_duplicate_types_all_yielded(self):
        lines = [
            "## Script Dependencies:",
            "## requests",
            "# gap",
            "## Script Dependencies:",
            "## rich",
        ]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 2
        assert [b.body_lines for b in blocks] == [("requests",), ("rich",)]

    def test_type_case_preserved(self):
        blocks = list(scan_blocks(["## script dependencies:", "## requests"]))
        assert blocks[0].block_type == "script dependencies"

    def test_indented_marker_terminates_block(self):
        lines = ["## Script Dependencies:", "## requests", "  ## rich"]
        blocks = list(scan_blocks(lines))
        assert blocks[0].body_lines == ("requests",)

    def test_line_terminators_stripped(self):
        lines = ["## Script Dependencies:\n", "##   requests\r\n", "\n"]
        blocks = list(scan_blocks(lines))
        assert blocks[0].body_lines == ("requests",)

    def test_body_line_with_colon_is_body(self):
        lines = ["## X-Meta:", "## author: someone"]
        blocks = list(scan_blocks(lines))
        assert len(blocks) == 1
        assert blocks[0].body_lines == ("author: someone",)


class TestLaziness:
    def test_consumes_input_only_as_far_as_needed(self):
        consumed = []

        def source():
            for line in ["## A:", "## one", "text", "## B:", "## two", "text"]:
                consumed.append(line)
                yield line

        it = scan_blocks(source())
        first = next(it)
        assert first.block_type == "A"
        # The terminating line is read, nothing beyond it
        assert consumed == ["## A:", "## one", "text"]

    def test_is_single_pass(self):
        it = scan_blocks(iter(["## A:", "## one"]))
        assert len(list(it)) == 1
        assert list(it) == []
