"""
Test cases for the bigjson scanner.

Tests focus on token classification, depth bookkeeping and sticky errors.
"""

import io
import logging
import unittest

from bigjson.core.scanner import Cursor, create_reader, load_reader, scan
from bigjson.core.tokens import Kind, Value
from bigjson.security.exceptions import ErrorKind, ScanError, SecurityError
from bigjson.utils.config import ReaderConfig, ReaderLimits


def scan_all(text, limit=100):
    """Scan until the first error or end of input, returning the values."""
    cursor = create_reader(text)
    values = []
    for _ in range(limit):
        value = scan(cursor)
        values.append(value)
        if value.kind == Kind.ERROR:
            break
    return cursor, values


class TestKindDiscriminants(unittest.TestCase):
    """Test the fixed integer values of token kinds."""

    def test_kind_values(self):
        """Kind integers are stable for external consumers."""
        expected = {
            Kind.ERROR: 0,
            Kind.END: 1,
            Kind.ARRAY: 2,
            Kind.OBJECT: 3,
            Kind.NUMBER: 4,
            Kind.STRING: 5,
            Kind.BOOL: 6,
            Kind.NULL: 7,
        }
        for kind, number in expected.items():
            with self.subTest(kind=kind):
                self.assertEqual(int(kind), number)


class TestScalarScanning(unittest.TestCase):
    """Test scanning of scalar tokens."""

    def test_string_span_excludes_quotes(self):
        """String spans cover the contents only."""
        cursor = create_reader('"hello"')
        value = scan(cursor)

        self.assertEqual(value, Value(Kind.STRING, 1, 6, 0))
        self.assertEqual(cursor.pos, 7)

    def test_empty_string(self):
        """An empty string has an empty span."""
        cursor = create_reader('""')
        value = scan(cursor)

        self.assertEqual(value.kind, Kind.STRING)
        self.assertEqual(value.start, value.end)

    def test_escaped_quote_does_not_close_string(self):
        """A backslash skips the following character."""
        text = '"a\\"b"'
        cursor = create_reader(text)
        value = scan(cursor)

        self.assertEqual(value.kind, Kind.STRING)
        self.assertEqual(text[value.start:value.end], 'a\\"b')
        self.assertEqual(cursor.pos, len(text))

    def test_escaped_backslash_before_quote(self):
        """An escaped backslash leaves the next quote as the closer."""
        text = '"a\\\\" 1'
        cursor = create_reader(text)
        value = scan(cursor)

        self.assertEqual(text[value.start:value.end], "a\\\\")
        self.assertEqual(scan(cursor).kind, Kind.NUMBER)

    def test_backslash_escapes_newline(self):
        """The character after a backslash is skipped even if it is a newline."""
        text = '"a\\\nb"'
        cursor = create_reader(text)
        value = scan(cursor)

        self.assertEqual(value.kind, Kind.STRING)
        self.assertEqual(value.end, len(text) - 1)

    def test_number_runs(self):
        """Numbers are maximal runs of number characters."""
        test_cases = ["42", "-123.45", "1.23e-4", "6E+10", "0"]

        for text in test_cases:
            with self.subTest(text=text):
                cursor = create_reader(text)
                value = scan(cursor)
                self.assertEqual(value, Value(Kind.NUMBER, 0, len(text), 0))

    def test_malformed_number_is_one_token(self):
        """Number scanning does not validate grammar."""
        cursor = create_reader("1.2.3 ")
        value = scan(cursor)

        self.assertEqual(value, Value(Kind.NUMBER, 0, 5, 0))
        self.assertIsNone(cursor.error)

    def test_literals(self):
        """true, false and null are recognised exactly."""
        test_cases = [
            ("true", Kind.BOOL),
            ("false", Kind.BOOL),
            ("null", Kind.NULL),
        ]

        for text, kind in test_cases:
            with self.subTest(text=text):
                cursor = create_reader(text)
                value = scan(cursor)
                self.assertEqual(value, Value(kind, 0, len(text), 0))

    def test_separators_and_whitespace_skipped(self):
        """Whitespace, commas and colons are never emitted."""
        cursor = create_reader(" \t\r\n,,::  7")
        value = scan(cursor)

        self.assertEqual(value.kind, Kind.NUMBER)
        self.assertEqual(value.start, 10)

    def test_literal_prefix_leaves_rest(self):
        """Only the literal itself is consumed."""
        cursor, values = scan_all("trueabc")

        self.assertEqual(values[0], Value(Kind.BOOL, 0, 4, 0))
        self.assertEqual(values[1].kind, Kind.ERROR)
        self.assertEqual(cursor.error.kind, ErrorKind.UNKNOWN_TOKEN)
        self.assertEqual(cursor.error.offset, 4)


class TestContainerScanning(unittest.TestCase):
    """Test depth bookkeeping for containers."""

    def test_empty_containers(self):
        """Empty arrays and objects open and close at depth 1."""
        for text, kind in (("[]", Kind.ARRAY), ("{}", Kind.OBJECT)):
            with self.subTest(text=text):
                cursor = create_reader(text)
                self.assertEqual(scan(cursor), Value(kind, 0, 1, 1))
                self.assertEqual(cursor.depth, 1)
                self.assertEqual(scan(cursor), Value(Kind.END, 1, 2, 1))
                self.assertEqual(cursor.depth, 0)

    def test_nested_depths(self):
        """Open tokens carry the new depth; END carries the closed depth."""
        cursor = create_reader("[[1], {}]")
        kinds_and_depths = [(v.kind, v.depth) for v in (scan(cursor) for _ in range(7))]

        self.assertEqual(
            kinds_and_depths,
            [
                (Kind.ARRAY, 1),
                (Kind.ARRAY, 2),
                (Kind.NUMBER, 2),
                (Kind.END, 2),
                (Kind.OBJECT, 2),
                (Kind.END, 2),
                (Kind.END, 1),
            ],
        )
        self.assertEqual(cursor.depth, 0)
        self.assertIsNone(cursor.error)

    def test_scalars_carry_current_depth(self):
        """Scalars report the depth of their enclosing container."""
        cursor = create_reader('{"a": [true]}')
        values = [scan(cursor) for _ in range(4)]

        self.assertEqual(values[1].depth, 1)
        self.assertEqual(values[3].depth, 2)


class TestScanErrors(unittest.TestCase):
    """Test error recording during scanning."""

    def test_unclosed_string(self):
        """Running out of input inside a string records UNCLOSED_STRING."""
        cursor = create_reader('"unclosed')
        value = scan(cursor)

        self.assertEqual(value.kind, Kind.ERROR)
        self.assertEqual(value.start, 0)
        self.assertEqual(cursor.error.kind, ErrorKind.UNCLOSED_STRING)
        self.assertEqual(cursor.pos, len('"unclosed'))

    def test_trailing_backslash_is_unclosed(self):
        """A backslash as the last character cannot close a string."""
        for text in ('"abc\\', '"abc\\"'):
            with self.subTest(text=text):
                cursor = create_reader(text)
                scan(cursor)
                self.assertEqual(cursor.error.kind, ErrorKind.UNCLOSED_STRING)

    def test_stray_close(self):
        """A close at depth 0 records STRAY_CONTAINER_CLOSE."""
        for char in "}]":
            with self.subTest(char=char):
                cursor = create_reader(char)
                value = scan(cursor)

                self.assertEqual(value, Value(Kind.ERROR, 0, 1, 0))
                self.assertEqual(cursor.error.kind, ErrorKind.STRAY_CONTAINER_CLOSE)
                self.assertEqual(cursor.error.message, f"stray '{char}'")
                self.assertEqual(cursor.depth, 0)
                self.assertEqual(cursor.pos, 0)

    def test_stray_close_after_balanced_container(self):
        """Depth never goes negative."""
        cursor, values = scan_all("[]]")

        self.assertEqual([v.kind for v in values], [Kind.ARRAY, Kind.END, Kind.ERROR])
        self.assertEqual(cursor.error.kind, ErrorKind.STRAY_CONTAINER_CLOSE)
        self.assertEqual(cursor.depth, 0)

    def test_unknown_tokens(self):
        """Characters that cannot start a token record UNKNOWN_TOKEN."""
        for text in ("xyz", "True", "nul", "'single'", "@"):
            with self.subTest(text=text):
                cursor = create_reader(text)
                value = scan(cursor)
                self.assertEqual(value.kind, Kind.ERROR)
                self.assertEqual(cursor.error.kind, ErrorKind.UNKNOWN_TOKEN)
                self.assertEqual(cursor.pos, 0)

    def test_empty_input(self):
        """Needing a token with no input left records UNEXPECTED_END_OF_INPUT."""
        for text in ("", "   ", " , "):
            with self.subTest(text=text):
                cursor = create_reader(text)
                value = scan(cursor)
                self.assertEqual(value.kind, Kind.ERROR)
                self.assertEqual(
                    cursor.error.kind, ErrorKind.UNEXPECTED_END_OF_INPUT
                )

    def test_truncated_container(self):
        """A truncated object ends in UNEXPECTED_END_OF_INPUT at depth 1."""
        cursor, values = scan_all('{"a":1')

        self.assertEqual(
            [v.kind for v in values],
            [Kind.OBJECT, Kind.STRING, Kind.NUMBER, Kind.ERROR],
        )
        self.assertEqual(cursor.error.kind, ErrorKind.UNEXPECTED_END_OF_INPUT)
        self.assertEqual(cursor.depth, 1)

    def test_error_is_sticky(self):
        """Scans after an error return the same value and do not move."""
        cursor = create_reader("[1, @, 2]")
        scan(cursor)
        scan(cursor)
        first = scan(cursor)
        error = cursor.error
        pos = cursor.pos

        for _ in range(3):
            again = scan(cursor)
            self.assertIs(again, first)
            self.assertEqual(cursor.pos, pos)
            self.assertIs(cursor.error, error)

    def test_first_error_is_kept(self):
        """Recording a second error does not overwrite the first."""
        cursor = create_reader("}")
        scan(cursor)
        cursor.record_error(ErrorKind.UNEXPECTED_OBJECT_END, "other", 0, 0)

        self.assertEqual(cursor.error.kind, ErrorKind.STRAY_CONTAINER_CLOSE)

    def test_raise_for_error(self):
        """raise_for_error raises the recorded ScanError."""
        cursor = create_reader("[1, 2]")
        scan(cursor)
        cursor.raise_for_error()

        cursor = create_reader('"open')
        scan(cursor)
        with self.assertRaises(ScanError) as cm:
            cursor.raise_for_error()
        self.assertIs(cm.exception, cursor.error)
        self.assertTrue(cursor.failed)

    def test_error_message_has_location(self):
        """Recorded errors carry a line and column."""
        cursor = create_reader('[\n  1,\n  @\n]')
        for _ in range(3):
            scan(cursor)

        self.assertEqual(cursor.error.position.line, 3)
        self.assertEqual(cursor.error.position.column, 3)
        self.assertIn("at line 3, column 3", str(cursor.error))


class TestNestingLimit(unittest.TestCase):
    """Test the optional nesting depth limit."""

    def test_nesting_limit_records_error(self):
        """Opening past the limit records NESTING_TOO_DEEP."""
        config = ReaderConfig(limits=ReaderLimits(max_nesting_depth=2))
        cursor = create_reader("[[[1]]]", config)
        kinds = [scan(cursor).kind for _ in range(3)]

        self.assertEqual(kinds, [Kind.ARRAY, Kind.ARRAY, Kind.ERROR])
        self.assertEqual(cursor.error.kind, ErrorKind.NESTING_TOO_DEEP)
        self.assertIn("Nesting depth 3 exceeds limit 2", cursor.error.message)
        self.assertEqual(cursor.depth, 2)
        self.assertEqual(cursor.pos, 2)

    def test_within_limit(self):
        """Documents within the limit scan normally."""
        config = ReaderConfig(limits=ReaderLimits(max_nesting_depth=2))
        cursor = create_reader("[[1]]", config)
        kinds = [scan(cursor).kind for _ in range(5)]

        self.assertNotIn(Kind.ERROR, kinds)
        self.assertEqual(cursor.depth, 0)


class TestReaderCreation(unittest.TestCase):
    """Test opening readers."""

    def test_cursor_initial_state(self):
        """A new cursor starts at offset 0 with no depth or error."""
        cursor = create_reader("[1]")

        self.assertIsInstance(cursor, Cursor)
        self.assertEqual(cursor.pos, 0)
        self.assertEqual(cursor.end, 3)
        self.assertEqual(cursor.depth, 0)
        self.assertIsNone(cursor.error)
        self.assertFalse(cursor.failed)
        self.assertEqual(cursor.remaining(), 3)

    def test_rejects_non_text(self):
        """Only str input is accepted."""
        with self.assertRaises(TypeError):
            create_reader(b"[1]")

    def test_input_size_limit(self):
        """Oversized input raises SecurityError."""
        config = ReaderConfig(limits=ReaderLimits(max_input_size=4))
        with self.assertRaises(SecurityError) as cm:
            create_reader("[1, 2, 3]", config)
        self.assertIn("Input size 9 exceeds limit 4", str(cm.exception))

    def test_load_reader_text_stream(self):
        """load_reader reads a text file object."""
        cursor = load_reader(io.StringIO('{"a": 1}'))

        self.assertEqual(cursor.text, '{"a": 1}')
        self.assertEqual(scan(cursor).kind, Kind.OBJECT)

    def test_load_reader_binary_stream(self):
        """load_reader decodes binary file objects as UTF-8."""
        cursor = load_reader(io.BytesIO('["café"]'.encode("utf-8")))

        self.assertEqual(cursor.text, '["café"]')

    def test_repr(self):
        """repr shows position, depth and error state."""
        cursor = create_reader("}")
        self.assertIn("ok", repr(cursor))
        scan(cursor)
        self.assertIn("STRAY_CONTAINER_CLOSE", repr(cursor))


class TestScannerLogging(unittest.TestCase):
    """Test diagnostic logging."""

    def test_error_is_logged_once(self):
        """The first recorded error is logged at debug level."""
        with self.assertLogs("bigjson.core.scanner", level=logging.DEBUG) as cm:
            cursor = create_reader('"open')
            scan(cursor)
            scan(cursor)

        failures = [line for line in cm.output if "UNCLOSED_STRING" in line]
        self.assertEqual(len(failures), 1)

    def test_configured_logger_is_used(self):
        """ReaderConfig.logger replaces the module logger."""
        logger = logging.getLogger("bigjson.tests.custom")
        config = ReaderConfig(logger=logger)

        with self.assertLogs(logger, level=logging.DEBUG) as cm:
            cursor = create_reader("[", config)
            scan(cursor)
            scan(cursor)

        self.assertTrue(
            any("UNEXPECTED_END_OF_INPUT" in line for line in cm.output)
        )


if __name__ == '__main__':
    unittest.main()
