import chardet
import requests
from typing import Optional, List, Iterator

from kegg2gpml.data_structure.kegg_data_structure import FeedStats
from kegg2gpml.utils import settings


class FeedError(RuntimeError):
    """A KEGG REST feed could not be fetched or read completely."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class FeedReader:
    """Fetch a KEGG REST feed and read it line by line with encoding handling."""

    DETECTION_BYTES = 10000
    MIN_CONFIDENCE = 0.7

    def __init__(self, timeout: Optional[float] = None, session=None):
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.session = session if session is not None else requests.Session()

    def _detect_encoding(self, raw_data: bytes) -> Optional[str]:
        if not raw_data:
            return None
        result = chardet.detect(raw_data)
        encoding = result['encoding']
        confidence = result['confidence'] or 0.0
        return encoding if confidence >= self.MIN_CONFIDENCE else None

    def _declared_encoding(self, response) -> Optional[str]:
        # requests falls back to ISO-8859-1 for text/* without a charset, so only
        # trust response.encoding when the server actually declared one
        content_type = response.headers.get('content-type', '')
        if 'charset=' in content_type.lower():
            return response.encoding
        return None

    def _decode(self, raw_line: bytes, encodings: List[str]) -> str:
        for enc in encodings:
            try:
                return raw_line.decode(enc)
            except (UnicodeDecodeError, LookupError):
                continue
        return raw_line.decode('utf-8', errors='replace')

    def iter_lines(self, url: str) -> Iterator[str]:
        """
        Stream the response for url and yield decoded lines.

        The response is closed on every exit path, including when the
        consumer stops early or raises.

        Raises:
            FeedError: connection problems, timeouts, non-200 status
        """
        try:
            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                if response.status_code != 200:
                    raise FeedError(url, f"HTTP status {response.status_code}")

                raw_lines = response.iter_lines()
                declared = self._declared_encoding(response)

                # Buffer the leading lines so the encoding can be detected first
                buffered = []
                if declared:
                    encodings = [declared, 'utf-8']
                else:
                    size = 0
                    for raw_line in raw_lines:
                        buffered.append(raw_line)
                        size += len(raw_line) + 1
                        if size >= self.DETECTION_BYTES:
                            break
                    sample = b'\n'.join(buffered)
                    try:
                        sample.decode('utf-8')
                        detected = None
                    except UnicodeDecodeError:
                        detected = self._detect_encoding(sample)
                    encodings = ['utf-8', detected]

                encodings = list(dict.fromkeys(e for e in encodings if e))

                for raw_line in buffered:
                    yield self._decode(raw_line, encodings)
                for raw_line in raw_lines:
                    yield self._decode(raw_line, encodings)
        except requests.RequestException as e:
            raise FeedError(url, str(e)) from e

    def read_first_line(self, url: str) -> str:
        """Return the first non-empty line of a feed."""
        lines = self.iter_lines(url)
        try:
            for line in lines:
                if line.strip():
                    return line
        finally:
            lines.close()
        raise FeedError(url, "empty response")


class LineParser:
    """Split tab separated feed lines into records."""

    def __init__(self, field_separator: str = "\t", comment_prefix: str = "#"):
        self.field_separator = field_separator
        self.comment_prefix = comment_prefix

    def is_blank(self, line: str) -> bool:
        stripped = line.strip()
        return not stripped or stripped.startswith(self.comment_prefix)

    def split_line(self, line: str, expected_fields: int = 2,
                   keep_remainder: bool = False) -> Optional[List[str]]:
        """
        Split a line into exactly expected_fields non-empty fields.

        A line with extra columns is malformed unless keep_remainder is set,
        in which case the last field keeps any further separators (free text
        columns). Returns None for malformed lines.
        """
        maxsplit = expected_fields - 1 if keep_remainder else -1
        parts = line.rstrip('\r\n').split(self.field_separator, maxsplit)
        if len(parts) != expected_fields:
            return None
        parts = [part.strip() for part in parts]
        if not all(parts):
            return None
        return parts


def strip_prefix(value: str, prefix: str) -> str:
    """Remove prefix from the start of value when present."""
    if prefix and value.startswith(prefix):
        return value[len(prefix):]
    return value


def iter_records(url: str, stats: FeedStats, reader: Optional[FeedReader] = None,
                 expected_fields: int = 2, keep_remainder: bool = False) -> Iterator[List[str]]:
    """
    Read a feed and yield its well-formed records.

    Structurally malformed lines are counted in stats.lines_skipped and never
    yielded. Callers count records_parsed themselves, since they may still
    reject a record on content.
    """
    reader = reader or FeedReader()
    parser = LineParser()

    for line in reader.iter_lines(url):
        if parser.is_blank(line):
            continue
        stats.lines_read += 1
        fields = parser.split_line(line, expected_fields, keep_remainder)
        if fields is None:
            stats.lines_skipped += 1
            continue
        yield fields
