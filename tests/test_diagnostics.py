"""Tests for bad-tag diagnostics."""

import logging

from doctags import LoggingBadTagReporter, Tag, format_bad_tags


class TestFormatBadTags:
    def test_header_without_id(self, make_doc, bad_tag):
        doc = make_doc(bad_tag, file="src/widget.js", starting_line=8)
        header = format_bad_tags(doc).splitlines()[0]
        assert header == (
            'Invalid tags found in doc, starting at line 8, from file "src/widget.js"'
        )

    def test_header_with_name(self, make_doc, bad_tag):
        doc = make_doc(bad_tag, name="Widget")
        header = format_bad_tags(doc).splitlines()[0]
        assert header.startswith('Invalid tags found in doc "Widget", starting at line 10')

    def test_id_preferred_over_name(self, make_doc, bad_tag):
        doc = make_doc(bad_tag, id="module:ui.Widget", name="Widget")
        assert '"module:ui.Widget"' in format_bad_tags(doc)

    def test_full_message(self, make_doc, bad_tag):
        doc = make_doc(bad_tag)
        assert format_bad_tags(doc) == (
            'Invalid tags found in doc, starting at line 10, from file "src/example.js"\n'
            "Line: 12: @param {Object} options the options passed t...\n"
            "    * Unterminated type expression\n"
            "\n"
        )

    def test_one_bullet_per_error(self, make_doc):
        tag = Tag("returns", "x", starting_line=3, errors=["first", "second"])
        lines = format_bad_tags(make_doc(tag)).splitlines()
        assert lines[1] == "Line: 3: @returns x..."
        assert lines[2:4] == ["    * first", "    * second"]

    def test_non_text_description_omitted(self, make_doc):
        tag = Tag("see", None, starting_line=5, errors=["Missing reference"])
        assert "Line: 5: @see\n" in format_bad_tags(make_doc(tag))

    def test_lists_every_bad_tag(self, make_doc, bad_tag):
        other = Tag("throws", "when it fails", starting_line=20, errors=["Bad type"])
        message = format_bad_tags(make_doc(bad_tag, other))
        assert "Line: 12:" in message
        assert "Line: 20: @throws when it fails..." in message

    def test_does_not_modify_document(self, make_doc, bad_tag):
        doc = make_doc(bad_tag, name="Widget")
        format_bad_tags(doc)
        assert doc.properties == {"name": "Widget"}
        assert doc.tags.bad_tags == [bad_tag]


class TestLoggingBadTagReporter:
    def test_logs_warning(self, make_doc, caplog):
        reporter = LoggingBadTagReporter()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(make_doc(), "bad tags")
        assert [r.getMessage() for r in caplog.records] == ["bad tags"]
        assert caplog.records[0].levelno == logging.WARNING

    def test_dedupes_same_document_and_message(self, make_doc, caplog):
        reporter = LoggingBadTagReporter()
        doc = make_doc()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(doc, "bad tags")
            reporter(doc, "bad tags")
            reporter(doc, "other bad tags")
            reporter(make_doc(starting_line=99), "bad tags")
        assert len(caplog.records) == 3

    def test_fresh_document_from_same_file_logged_again(self, make_doc, caplog):
        reporter = LoggingBadTagReporter()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(make_doc(), "bad tags")
            reporter(make_doc(), "bad tags")
        assert len(caplog.records) == 2

    def test_only_consecutive_repeats_skipped(self, make_doc, caplog):
        reporter = LoggingBadTagReporter()
        doc = make_doc()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(doc, "first")
            reporter(doc, "second")
            reporter(doc, "first")
        assert [r.getMessage() for r in caplog.records] == ["first", "second", "first"]

    def test_dedupe_disabled(self, make_doc, caplog):
        reporter = LoggingBadTagReporter(dedupe=False)
        doc = make_doc()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(doc, "bad tags")
            reporter(doc, "bad tags")
        assert len(caplog.records) == 2

    def test_reset(self, make_doc, caplog):
        reporter = LoggingBadTagReporter()
        doc = make_doc()
        with caplog.at_level(logging.WARNING, logger="doctags"):
            reporter(doc, "bad tags")
            reporter.reset()
            reporter(doc, "bad tags")
        assert len(caplog.records) == 2

    def test_custom_logger(self, make_doc, caplog):
        reporter = LoggingBadTagReporter(logger=logging.getLogger("docs.build"))
        with caplog.at_level(logging.WARNING, logger="docs.build"):
            reporter(make_doc(), "bad tags")
        assert caplog.records[0].name == "docs.build"
