"""Token dump gateway: reads a pre-tokenized file (JSON) into a TokenStream."""

import json
from pathlib import Path
from typing import Any

from operator_spacing_linter.domain.token_stream import TokenStream
from operator_spacing_linter.domain.tokens import TokenKind


class TokenDumpGateway:
    """
    Loads token dumps written by an external tokenizer.

    Format::

        {"file": "example.php",
         "tokens": [{"type": "T_VARIABLE", "content": "$a"},
                    {"type": "T_EQUAL", "content": "="}, ...]}

    A bare list of token objects is accepted too. Line and column in the
    dump are ignored; they are recomputed from the contents. Token types the
    rule does not distinguish (T_TRUE, T_PUBLIC, ...) load as OTHER with their
    content kept.
    """

    def load(self, path: str) -> TokenStream:
        """Read and parse the dump at path. Raises OSError or ValueError."""
        dump_path = Path(path)
        with dump_path.open(encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}: not valid JSON ({exc.msg} at line {exc.lineno}).") from exc
        return self.parse(data, default_name=str(dump_path))

    def parse(self, data: Any, default_name: str = "") -> TokenStream:
        """Build a stream from already-decoded dump data."""
        if isinstance(data, list):
            raw_tokens, filename = data, default_name
        elif isinstance(data, dict) and isinstance(data.get("tokens"), list):
            raw_tokens = data["tokens"]
            filename = str(data.get("file") or default_name)
        else:
            raise ValueError(f"{default_name or 'token dump'}: expected a 'tokens' list.")

        pairs: list[tuple[TokenKind, str]] = []
        for position, raw in enumerate(raw_tokens):
            if not isinstance(raw, dict):
                raise ValueError(f"{filename}: token {position} is not an object.")
            kind_name = raw.get("type", raw.get("kind"))
            content = raw.get("content")
            if not isinstance(kind_name, str) or not isinstance(content, str):
                raise ValueError(f"{filename}: token {position} needs string 'type' and 'content'.")
            kind = TokenKind.from_name(kind_name, default=TokenKind.OTHER)
            pairs.append((kind, content))
        return TokenStream.from_contents(pairs, filename)
