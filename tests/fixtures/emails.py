"""
Sample email data for testing.

This module contains .eml samples as bytes:
- Plain text and HTML-only emails
- multipart/alternative in both part orders
- Nested multiparts with several HTML parts
- multipart/related with inline images (HTML and plain text references)
- Emails with text attachments, encoded headers and file names
- Unknown / mismatching charsets
- Messages without any text part and malformed multiparts
"""

import base64

# Fake PNG/GIF payloads (only the bytes matter, not the pixels)
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00!\xf9\x04\x01\x00\x00\x00\x00,"
PDF_BYTES = b"%PDF-1.4\n1 0 obj<</Type/Catalog>>endobj\ntrailer<</Root 1 0 R>>\n%%EOF\n"

PNG_BASE64 = base64.b64encode(PNG_BYTES)
GIF_BASE64 = base64.b64encode(GIF_BYTES)
PDF_BASE64 = base64.b64encode(PDF_BYTES)

# Output of the stubbed PDF renderer
FAKE_PDF = b"%PDF-1.7\n% rendered in tests\n%%EOF\n"

# Plain text, us-ascii, no trailing newline
SIMPLE_PLAIN_TEXT_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Test Email
Date: Mon, 12 Oct 2026 10:30:00 +0200
Message-ID: <plain-1@example.com>
MIME-Version: 1.0
Content-Type: text/plain; charset="us-ascii"

line1
line2"""

# HTML only, with a meta charset that disagrees with the part header
HTML_ONLY_EML = b"""From: newsletter@example.com
To: recipient@example.com
Subject: Welcome
Date: Mon, 12 Oct 2026 11:00:00 +0200
MIME-Version: 1.0
Content-Type: text/html; charset="iso-8859-1"
Content-Transfer-Encoding: quoted-printable

<html><head><meta charset=3D"utf-8"><title>Welcome</title></head><body><p>Caf=
=E9 opening</p></body></html>
"""

# multipart/alternative: text/plain first, text/html second
MULTIPART_ALTERNATIVE_EML = b"""From: Alice Example <alice@example.com>
To: Bob <bob@example.com>, carol@example.com
Cc: dave@example.com
Subject: Quarterly report
Date: Mon, 12 Oct 2026 10:30:00 +0200
Message-ID: <alt-1@example.com>
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="ALT-BOUNDARY"

--ALT-BOUNDARY
Content-Type: text/plain; charset="utf-8"

Plain version of the report.
--ALT-BOUNDARY
Content-Type: text/html; charset="utf-8"

<html><head><meta http-equiv="Content-Type" content="text/html; charset=iso-8859-1"></head><body><p>HTML version of the report.</p></body></html>
--ALT-BOUNDARY--
"""

# multipart/alternative: text/html first, text/plain second
HTML_FIRST_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: HTML first
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="B1"

--B1
Content-Type: text/html; charset="utf-8"

<html><body><p>HTML comes first</p></body></html>
--B1
Content-Type: text/plain; charset="utf-8"

Plain comes second
--B1--
"""

# Two HTML parts at different depths: the last one in document order wins
NESTED_MULTIPLE_HTML_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Nested
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="OUTER"

--OUTER
Content-Type: multipart/alternative; boundary="INNER"

--INNER
Content-Type: text/plain; charset="utf-8"

first plain
--INNER
Content-Type: text/html; charset="utf-8"

<p>first html</p>
--INNER--

--OUTER
Content-Type: text/html; charset="windows-1252"
Content-Disposition: inline

<p>second html</p>
--OUTER--
"""

# Blank HTML part followed by plain text: the plain text is used
BLANK_HTML_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Blank html
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="B2"

--B2
Content-Type: text/html; charset="utf-8"


--B2
Content-Type: text/plain; charset="utf-8"

Only the plain text has content
--B2--
"""

# multipart/related: HTML referencing an inline PNG through cid:
INLINE_IMAGE_EML = (
    b"""From: sender@example.com
To: recipient@example.com
Subject: Inline image
MIME-Version: 1.0
Content-Type: multipart/related; boundary="REL"

--REL
Content-Type: text/html; charset="utf-8"

<html><body><img src="cid:img1"><img src="cid:missing@example.com"></body></html>
--REL
Content-Type: image/png
Content-Transfer-Encoding: base64
Content-ID: <img1>
Content-Disposition: inline; filename="img1.png"

"""
    + PNG_BASE64
    + b"""
--REL
Content-Type: image/png
Content-Transfer-Encoding: base64
Content-Disposition: inline; filename="no-cid.png"

"""
    + PNG_BASE64
    + b"""
--REL--
"""
)

# multipart/related: plain text with a [cid:...] marker
PLAIN_WITH_CID_EML = (
    b"""From: sender@example.com
To: recipient@example.com
Subject: Plain with logo
MIME-Version: 1.0
Content-Type: multipart/related; boundary="REL2"

--REL2
Content-Type: text/plain; charset="utf-8"

Logo below:\r
[cid:logo@example.com]\r
[cid:unknown@example.com]
--REL2
Content-Type: image/gif
Content-Transfer-Encoding: base64
Content-ID: <logo@example.com>

"""
    + GIF_BASE64
    + b"""
--REL2--
"""
)

# multipart/mixed: body plus text and HTML attachments
ATTACHMENT_EML = (
    b"""From: =?utf-8?Q?Andr=C3=A9?= <andre@example.com>
To: recipient@example.com
Subject: =?utf-8?Q?R=C3=A9sum=C3=A9?= attached
Date: Mon, 12 Oct 2026 12:00:00 +0200
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="MIX"

--MIX
Content-Type: text/plain; charset="utf-8"

See attached.
--MIX
Content-Type: text/html; charset="utf-8"
Content-Disposition: attachment; filename="report.html"

<html><body><p>Attached report, never the body</p></body></html>
--MIX
Content-Type: text/plain; charset="utf-8"
Content-Disposition: ATTACHMENT; filename="=?utf-8?Q?r=C3=A9sum=C3=A9.txt?="

secret attachment text
--MIX
Content-Type: application/pdf
Content-Transfer-Encoding: base64
Content-Disposition: attachment; filename="../../invoice.pdf"

"""
    + PDF_BASE64
    + b"""
--MIX
Content-Type: application/pdf
Content-Transfer-Encoding: base64
Content-Disposition: attachment

"""
    + PDF_BASE64
    + b"""
--MIX--
"""
)

# No text/plain or text/html part at all
NO_TEXT_PARTS_EML = (
    b"""From: scanner@example.com
To: recipient@example.com
Subject: Scan
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="SCAN"

--SCAN
Content-Type: application/pdf
Content-Transfer-Encoding: base64
Content-Disposition: attachment; filename="scan.pdf"

"""
    + PDF_BASE64
    + b"""
--SCAN--
"""
)

# Unknown charset: decoded as UTF-8, output declares UTF-8
UNKNOWN_CHARSET_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Unknown charset
MIME-Version: 1.0
Content-Type: text/plain; charset="x-no-such-charset"
Content-Transfer-Encoding: 8bit

Caf\xc3\xa9 ready"""

# Declared us-ascii but the bytes are UTF-8
MISMATCHED_CHARSET_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Mismatched charset
MIME-Version: 1.0
Content-Type: text/plain; charset="us-ascii"
Content-Transfer-Encoding: 8bit

Caf\xc3\xa9 ready"""

# Multipart without boundary: children cannot be enumerated
MALFORMED_MULTIPART_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Broken
MIME-Version: 1.0
Content-Type: multipart/mixed

no boundary here
"""

# Collection for easy access
SAMPLE_EMAILS = {
    "simple_plain_text": SIMPLE_PLAIN_TEXT_EML,
    "html_only": HTML_ONLY_EML,
    "multipart_alternative": MULTIPART_ALTERNATIVE_EML,
    "html_first": HTML_FIRST_EML,
    "nested_multiple_html": NESTED_MULTIPLE_HTML_EML,
    "blank_html": BLANK_HTML_EML,
    "inline_image": INLINE_IMAGE_EML,
    "plain_with_cid": PLAIN_WITH_CID_EML,
    "attachment": ATTACHMENT_EML,
    "no_text_parts": NO_TEXT_PARTS_EML,
    "unknown_charset": UNKNOWN_CHARSET_EML,
    "mismatched_charset": MISMATCHED_CHARSET_EML,
    "malformed_multipart": MALFORMED_MULTIPART_EML,
}
