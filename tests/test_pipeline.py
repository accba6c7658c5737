"""Tests for bigram.engine.pipeline."""
import io
import logging

import pytest

from bigram.engine.histogram import BigramHistogram
from bigram.engine.pipeline import format_report, read_text, run_pipeline
from bigram.engine.tokenizer import TokenizerConfig
from bigram.errors import BigramError, FileAccessError, InvalidEncoding


class TestReadText:
    """Test read_text file loading and decoding."""

    def test_reads_utf8(self, write_text):
        path = write_text("naïve café\n")
        assert read_text(path) == "naïve café\n"

    def test_keeps_crlf(self, write_text):
        path = write_text("a\r\nb\r\n", newline="")
        assert read_text(path) == "a\r\nb\r\n"

    def test_drops_byte_order_mark(self, write_bytes):
        path = write_bytes(b"\xef\xbb\xbfhello world")
        assert read_text(path) == "hello world"

    def test_invalid_utf8(self, write_bytes):
        path = write_bytes(b"good start \xff\xfe bad")
        with pytest.raises(InvalidEncoding) as excinfo:
            read_text(path)
        assert excinfo.value.offset == 11
        assert excinfo.value.exit_code == 9
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert "not valid UTF-8" in str(excinfo.value)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.txt"
        with pytest.raises(FileAccessError) as excinfo:
            read_text(path)
        assert excinfo.value.path == path
        assert isinstance(excinfo.value.cause, FileNotFoundError)
        assert "No such file or directory" in str(excinfo.value)

    def test_directory(self, tmp_path):
        with pytest.raises(FileAccessError):
            read_text(tmp_path)

    def test_errors_share_base(self):
        assert issubclass(FileAccessError, BigramError)
        assert issubclass(InvalidEncoding, BigramError)


class TestFormatReport:
    def test_report_lines(self):
        h = BigramHistogram.from_tokens(["the", "quick", "the", "quick"])
        assert format_report("words.txt", h) == [
            "Generating bigram histogram for words.txt",
            '• "the quick" 2',
            '• "quick the" 1',
            "Total no. of bigrams generated: 3",
        ]

    def test_empty_report(self):
        assert format_report("empty.txt", BigramHistogram()) == [
            "Generating bigram histogram for empty.txt",
            "Total no. of bigrams generated: 0",
        ]


class TestRunPipeline:
    """Test the full file-to-report pipeline."""

    def test_writes_report(self, write_text):
        path = write_text("scott's hat is her'cules' pride\n")
        out = io.StringIO()
        result = run_pipeline(path, out=out)
        assert out.getvalue() == (
            f"Generating bigram histogram for {path}\n"
            '• "scott hat" 1\n'
            '• "hat is" 1\n'
            '• "is her" 1\n'
            '• "her pride" 1\n'
            "Total no. of bigrams generated: 4\n"
        )
        assert result["token_count"] == 5
        assert result["distinct"] == 4
        assert result["total"] == 4
        assert result["validation"] is None
        assert isinstance(result["histogram"], BigramHistogram)

    def test_total_counts_repeats(self, write_text):
        path = write_text("the quick brown fox and the quick blue hare")
        out = io.StringIO()
        result = run_pipeline(path, out=out)
        assert result["distinct"] == 7
        assert result["total"] == 8
        assert out.getvalue().endswith("Total no. of bigrams generated: 8\n")

    def test_config_passed_through(self, write_text):
        path = write_text("The quick and the QUICK")
        out = io.StringIO()
        result = run_pipeline(path, config=TokenizerConfig(fold_case=True), out=out)
        assert result["histogram"].count("the quick") == 2

    def test_crlf_file_matches_lf_file(self, write_text):
        text = "one two\nthree one two\n"
        lf = write_text(text, name="lf.txt", newline="")
        crlf = write_text(text.replace("\n", "\r\n"), name="crlf.txt", newline="")
        a = run_pipeline(lf, out=io.StringIO())["histogram"]
        b = run_pipeline(crlf, out=io.StringIO())["histogram"]
        assert a == b

    def test_verify(self, write_text):
        path = write_text("a rose is a rose is a rose")
        result = run_pipeline(path, out=io.StringIO(), verify=True)
        assert result["validation"]["passed"]
        assert result["validation"]["total"] == 7

    def test_invalid_encoding_emits_no_histogram(self, write_bytes):
        path = write_bytes(b"the quick \x80 brown fox")
        out = io.StringIO()
        with pytest.raises(InvalidEncoding):
            run_pipeline(path, out=out)
        assert out.getvalue() == f"Generating bigram histogram for {path}\n"

    def test_logs_progress(self, write_text, caplog):
        path = write_text("one two three")
        with caplog.at_level(logging.DEBUG, logger="bigram.engine.pipeline"):
            run_pipeline(path, out=io.StringIO())
        assert "Tokens: 3" in caplog.text
        assert "Bigrams: 2 distinct from 2 total" in caplog.text
        assert "Total pipeline time" in caplog.text
