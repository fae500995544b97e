"""
Unit tests for document decoding.
"""

import io
import os
import unittest
import logging
from unittest import mock

import docx

from resume_match import config
from resume_match.document_parser import parse_resume
from resume_match.errors import (
    DecodeError,
    DocumentTooLargeError,
    UnsupportedFormatError,
)
from resume_match.extract import decode_document, normalize_mime_type

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


def build_docx(paragraphs) -> bytes:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_pdf(page_texts) -> bytes:
    """A minimal PDF with one line of Helvetica text per page."""
    count = len(page_texts)
    font_id = 3 + 2 * count
    kids = " ".join(f"{3 + i} 0 R" for i in range(count))

    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>",
    ]
    for i in range(count):
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Contents {3 + count + i} 0 R /Resources << /Font << /F1 {font_id} 0 R >> >> >>"
        )
    for text in page_texts:
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET"
        objects.append(f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream")
    objects.append("<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1"))

    xref_offset = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1"))
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode("latin-1"))
    out.write(
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n".encode("latin-1")
    )
    return out.getvalue()


def fake_pdf(page_texts):
    """A pdfplumber.open replacement yielding pages with the given texts."""
    pages = []
    for text in page_texts:
        page = mock.Mock()
        page.extract_text.return_value = text
        pages.append(page)
    opener = mock.MagicMock()
    opener.return_value.__enter__.return_value.pages = pages
    return opener


class TestMimeTypes(unittest.TestCase):
    """Test MIME type handling."""

    def test_normalize(self):
        self.assertEqual(normalize_mime_type("Text/Plain; charset=UTF-8"), "text/plain")
        self.assertEqual(normalize_mime_type(None), "")

    def test_unsupported_format(self):
        with self.assertRaises(UnsupportedFormatError) as ctx:
            decode_document(b"\x89PNG", "image/png")
        self.assertEqual(ctx.exception.mime_type, "image/png")

    def test_unsupported_format_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_resume(b"hello", "application/msword")


class TestPlainText(unittest.TestCase):
    """Test plain-text decoding."""

    def test_utf8(self):
        self.assertEqual(decode_document("Skills\nPython – café".encode("utf-8"), "text/plain"),
                         "Skills\nPython – café")

    def test_charset_parameter(self):
        self.assertEqual(decode_document(b"Skills", "text/plain; charset=utf-8"), "Skills")

    def test_invalid_utf8(self):
        with self.assertRaises(DecodeError):
            decode_document(b"\xff\xfe\xfa", "text/plain")

    def test_too_large(self):
        with mock.patch.object(config, "MAX_DOCUMENT_BYTES", 10):
            with self.assertRaises(DocumentTooLargeError) as ctx:
                decode_document(b"x" * 11, "text/plain")
        self.assertEqual(ctx.exception.size, 11)
        self.assertIsInstance(ctx.exception, DecodeError)


class TestDocx(unittest.TestCase):
    """Test DOCX decoding via python-docx."""

    def test_paragraphs_become_lines(self):
        raw = build_docx(["Skills", "Python, Docker", "Education", "Bachelor of Science"])
        parsed = parse_resume(raw, config.MIME_DOCX)
        self.assertEqual(parsed.skills, ["Python", "Docker"])
        self.assertEqual(parsed.education, ["Bachelor of Science"])

    def test_corrupt_docx(self):
        with self.assertRaises(DecodeError):
            decode_document(b"not a zip archive", config.MIME_DOCX)


class TestPdf(unittest.TestCase):
    """Test PDF decoding via pdfplumber."""

    def test_pages_joined(self):
        with mock.patch("resume_match.extract.pdfplumber.open", fake_pdf(["Skills", None, "AWS, Git"])):
            text = decode_document(b"%PDF-1.4", config.MIME_PDF)
        self.assertEqual(text, "Skills\n\nAWS, Git")

    def test_parse_pdf_resume(self):
        with mock.patch("resume_match.extract.pdfplumber.open", fake_pdf(["Technical Skills\nAWS, Git"])):
            parsed = parse_resume(b"%PDF-1.4", config.MIME_PDF)
        self.assertEqual(parsed.skills, ["AWS", "Git"])

    def test_pdf_library_failure(self):
        opener = mock.MagicMock(side_effect=Exception("No /Root object"))
        with mock.patch("resume_match.extract.pdfplumber.open", opener):
            with self.assertRaises(DecodeError) as ctx:
                decode_document(b"garbage", config.MIME_PDF)
        self.assertIn("No /Root object", str(ctx.exception))


class TestRealPdf(unittest.TestCase):
    """Test PDF decoding against pdfplumber itself."""

    def test_pages_joined_with_newlines(self):
        raw = build_pdf(["Skills", "AWS, Git"])
        text = decode_document(raw, config.MIME_PDF)
        lines = [line.strip() for line in text.splitlines()]
        self.assertEqual(lines[0], "Skills")
        self.assertIn("AWS", lines[1])
        self.assertIn("Git", lines[1])

    def test_parse_real_pdf_resume(self):
        raw = build_pdf(["Skills", "AWS, Git"])
        parsed = parse_resume(raw, config.MIME_PDF)
        self.assertEqual(parsed.skills, ["AWS", "Git"])

    def test_truncated_pdf(self):
        raw = build_pdf(["Skills"])
        with self.assertRaises(DecodeError):
            decode_document(raw[:20], config.MIME_PDF)


class TestEnvironmentSettings(unittest.TestCase):
    """Test integer settings read from the environment."""

    def test_valid_value(self):
        with mock.patch.dict(os.environ, {"RESUME_MATCH_TEST_BYTES": " 2048 "}):
            self.assertEqual(config.int_from_env("RESUME_MATCH_TEST_BYTES", 10), 2048)

    def test_unset_uses_default(self):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("RESUME_MATCH_TEST_BYTES", None)
            self.assertEqual(config.int_from_env("RESUME_MATCH_TEST_BYTES", 10), 10)

    def test_non_numeric_uses_default(self):
        with mock.patch.dict(os.environ, {"RESUME_MATCH_TEST_BYTES": "ten megabytes"}):
            with self.assertLogs("resume_match.config", level="WARNING"):
                self.assertEqual(config.int_from_env("RESUME_MATCH_TEST_BYTES", 10), 10)

    def test_non_positive_uses_default(self):
        with mock.patch.dict(os.environ, {"RESUME_MATCH_TEST_BYTES": "-5"}):
            self.assertEqual(config.int_from_env("RESUME_MATCH_TEST_BYTES", 10), 10)

    def test_default_document_limit(self):
        self.assertGreater(config.MAX_DOCUMENT_BYTES, 0)


if __name__ == "__main__":
    unittest.main()
