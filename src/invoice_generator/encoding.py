"""
Text encoding for the standard PDF fonts.

The built-in Type 1 fonts (Helvetica, Times, Courier) only cover the
WinAnsi (cp1252) character set, so anything outside it is transliterated
before it reaches the canvas.
"""

import unicodedata
from dataclasses import dataclass


@dataclass(frozen=True)
class TextEncoder:
    codec: str = 'cp1252'
    replacement: str = '?'

    def _encodable(self, char: str) -> bool:
        try:
            char.encode(self.codec)
            return True
        except UnicodeEncodeError:
            return False

    def encode(self, text: str) -> str:
        """Return ``text`` with every character the target font cannot show replaced."""
        if not text:
            return ""

        out = []
        for char in text:
            if self._encodable(char):
                out.append(char)
                continue
            # e.g. 'ő' -> 'o' + combining accent -> 'o'
            decomposed = unicodedata.normalize('NFKD', char)
            kept = ''.join(c for c in decomposed if not unicodedata.combining(c) and self._encodable(c))
            out.append(kept or self.replacement)
        return ''.join(out)


class PassthroughEncoder:
    """Encoder for embedded TrueType fonts that cover the full text."""

    def encode(self, text: str) -> str:
        return text or ""
