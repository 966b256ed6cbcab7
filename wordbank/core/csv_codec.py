"""CSV Codec — pure encode/decode between Records and delimited text.

Invariants:
    - Fixed dialect: delimiter ",", quote '"', header "word,definition"
    - encode_records always emits the header; lines joined by "\\n", no trailing newline
    - decode_records never raises: malformed lines degrade (missing definition -> "")
    - decode_records(encode_records(rs)) == rs for any fields without
      surrounding whitespace (fields are trimmed on decode) and without CRLF
      (stored as LF, so CRLF and LF files decode alike)
    - Header detection is exact: first non-blank line, trimmed and lowercased,
      must equal "word,definition"

Design Decisions:
    - Hand-written tokenizer over the csv module: the format is fixed to two
      columns, trims fields, tolerates ragged lines and never raises
    - Line splitter is quote-aware: a newline inside a quoted field is content,
      so definitions spanning several lines survive export/import
    - Only a quote opening a field starts a quoted region: a stray quote mid-field
      (5" nail) stays on its own line
    - An unterminated opening quote runs to the end of the text; the rest of
      the blob becomes that record's content rather than an error
"""

from collections.abc import Iterable

from wordbank.core.domain_types import Record
from wordbank.core.repository_protocols import RecordLike

DELIMITER = ","
QUOTE = '"'
HEADER = "word,definition"
MEDIA_TYPE = "text/csv"

_NEEDS_QUOTING = (DELIMITER, QUOTE, "\n", "\r")


# ─── Encoder ─────────────────────────────────────────────────────

def escape_field(value: object) -> str:
    """Return the CSV-safe form of one value. None is treated as empty text."""
    text = "" if value is None else str(value)
    if any(ch in text for ch in _NEEDS_QUOTING):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def encode_records(records: Iterable[RecordLike]) -> str:
    """Serialize records, in order, below the fixed header line."""
    lines = [HEADER]
    lines.extend(
        escape_field(r.word) + DELIMITER + escape_field(r.definition)
        for r in records
    )
    return "\n".join(lines)


# ─── Decoder ─────────────────────────────────────────────────────

def split_lines(text: str) -> list[str]:
    """Split on LF (optionally preceded by CR), ignoring LFs inside quoted fields.

    A quoted region only opens on a quote that starts a field (line start or
    after an unquoted comma, leading whitespace allowed); a quote in the
    middle of an unquoted field cannot swallow the following lines.
    CRLF inside a quoted field is stored as LF.
    """
    lines: list[str] = []
    current: list[str] = []
    in_quotes = False
    quoted_field = False
    at_field_start = True
    for ch in text:
        if ch == QUOTE:
            if in_quotes or quoted_field:
                # "" inside a quoted field toggles twice and nets out
                in_quotes = not in_quotes
            elif at_field_start:
                in_quotes = quoted_field = True
            at_field_start = False
        elif ch == "\n":
            if not in_quotes:
                lines.append(_drop_trailing_cr("".join(current)))
                current = []
                quoted_field = False
                at_field_start = True
                continue
            if current and current[-1] == "\r":
                current.pop()
        elif ch == DELIMITER and not in_quotes:
            quoted_field = False
            at_field_start = True
        elif not ch.isspace():
            at_field_start = False
        current.append(ch)
    lines.append(_drop_trailing_cr("".join(current)))
    return lines


def _drop_trailing_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def tokenize_line(line: str) -> list[str]:
    """Split one line into trimmed fields. A blank line yields []."""
    line = line.strip()
    if not line:
        return []

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return [f.strip() for f in fields]


def parse_record(line: str) -> Record | None:
    """First token -> word, second -> definition. None for a blank line."""
    tokens = tokenize_line(line)
    if not tokens:
        return None
    definition = tokens[1] if len(tokens) > 1 else ""
    return Record(word=tokens[0], definition=definition)


def decode_records(text: str) -> list[Record]:
    """Parse a whole CSV blob into records, skipping blanks and an optional header."""
    lines = [line for line in split_lines(text) if line.strip()]
    if lines and lines[0].strip().lower() == HEADER:
        lines = lines[1:]

    records: list[Record] = []
    for line in lines:
        record = parse_record(line)
        if record is not None:
            records.append(record)
    return records
