"""Best-effort text recovery straight from PDF bytes.

Used when no PDF backend could open the file. Three independent passes run over
the raw bytes: literal strings ``(...)``, hex strings ``<...>`` and printable
runs inside ``stream ... endstream`` blocks. Compressed streams yield nothing
useful, which is expected.
"""

import re

_LITERAL_RE = re.compile(rb"\(((?:\\.|[^\\()])*)\)", re.DOTALL)
_HEX_RE = re.compile(rb"<([0-9A-Fa-f\s]{4,})>")
_STREAM_RE = re.compile(rb"stream\r?\n(.*?)\r?\nendstream", re.DOTALL)
_PRINTABLE_RUN_RE = re.compile(r"[A-Za-z0-9\s.,;:'\"!?@#$%^&*()\[\]{}_+=<>/-]{4,}")
_ALPHA_RE = re.compile(r"[A-Za-z]{3,}")
_SPACES_RE = re.compile(r"\s+")

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "(": "(",
    ")": ")",
    "\\": "\\",
}
_ESCAPE_RE = re.compile(r"\\([0-7]{1,3}|.)", re.DOTALL)


def _unescape_literal(raw: bytes) -> str:
    text = raw.decode("latin-1")

    def _replace(match: re.Match[str]) -> str:
        token = match.group(1)
        if token[0] in "01234567":
            return chr(int(token, 8))
        return _ESCAPES.get(token, token)

    return _ESCAPE_RE.sub(_replace, text)


def _decode_hex(raw: bytes) -> str:
    digits = re.sub(rb"\s", b"", raw)
    if len(digits) % 2:
        digits += b"0"
    data = bytes.fromhex(digits.decode("ascii"))
    if data.startswith(b"\xfe\xff"):
        return data[2:].decode("utf-16-be", errors="ignore")
    return data.decode("utf-8", errors="ignore")


def scan_literal_strings(pdf_bytes: bytes) -> list[str]:
    return [_unescape_literal(m.group(1)) for m in _LITERAL_RE.finditer(pdf_bytes)]


def scan_hex_strings(pdf_bytes: bytes) -> list[str]:
    return [_decode_hex(m.group(1)) for m in _HEX_RE.finditer(pdf_bytes)]


def scan_streams(pdf_bytes: bytes) -> list[str]:
    runs: list[str] = []
    for block in _STREAM_RE.finditer(pdf_bytes):
        content = block.group(1).decode("latin-1")
        runs.extend(
            run for run in _PRINTABLE_RUN_RE.findall(content) if _ALPHA_RE.search(run)
        )
    return runs


def scan(pdf_bytes: bytes) -> str:
    """Union of all three passes with whitespace collapsed."""
    if not pdf_bytes:
        return ""
    pieces = scan_literal_strings(pdf_bytes) + scan_hex_strings(pdf_bytes)
    pieces += scan_streams(pdf_bytes)
    return _SPACES_RE.sub(" ", " ".join(p for p in pieces if p.strip())).strip()
