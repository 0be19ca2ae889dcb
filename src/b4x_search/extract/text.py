from __future__ import annotations

import re

_SCRIPT_RX = re.compile(r"<script[^>]*>.*?</script>", re.I | re.S)
_STYLE_RX = re.compile(r"<style[^>]*>.*?</style>", re.I | re.S)
_TAG_RX = re.compile(r"<[^>]+>")
_WS_RX = re.compile(r"\s+")

# Order matters: &amp; is decoded after &nbsp; so "&amp;nbsp;" stays literal text.
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def strip_html(html: str) -> str:
    """Reduce an HTML fragment to single-spaced plain text."""
    text = _SCRIPT_RX.sub("", html)
    text = _STYLE_RX.sub("", text)
    text = _TAG_RX.sub(" ", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return _WS_RX.sub(" ", text).strip()
