from html import escape

_STYLE = """
body { font-family: Arial, Helvetica, sans-serif; font-size: 11pt; line-height: 1.5; color: #333; }
h1 { font-size: 18pt; margin: 0 0 8pt 0; color: #2c3e50; }
h2 { font-size: 14pt; margin: 14pt 0 6pt 0; color: #34495e; }
h3 { font-size: 12pt; margin: 10pt 0 4pt 0; color: #34495e; }
p { margin: 0 0 6pt 0; }
ul { margin: 0 0 6pt 0; padding-left: 18pt; }
table { border-collapse: collapse; margin: 6pt 0; }
td { border: 1px solid #ccc; padding: 3pt 6pt; vertical-align: top; }
.notice { color: #7f8c8d; font-style: italic; }
""".strip()


def wrap(title: str, body: str) -> str:
    """A complete HTML document around an already escaped body."""
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<title>{escape(title)}</title><style>{_STYLE}</style></head>"
        f"<body>{body}</body></html>"
    )
