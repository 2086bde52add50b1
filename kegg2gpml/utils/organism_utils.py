import re

from kegg2gpml.parsing_functions.parsing_utils import FeedReader, FeedError
from kegg2gpml.utils import settings

# Species name cache: {info feed URL: display name}
_SPECIES_NAMES = {}

# First line of /info/<org>:
#   T01001           Homo sapiens (human) KEGG Genes Database
# The organism name follows the leading T-number and its whitespace run and ends
# at the first parenthesis, or at " KEGG " when there is no common name.
_INFO_LINE = re.compile(r'^\s*\S+\s+(?P<rest>.+)$')


def parse_species_name(info_line):
    """
    Extract the organism display name from the first line of a KEGG info response.

    Args:
        info_line: e.g. 'T01001           Homo sapiens (human) KEGG Genes Database'

    Returns:
        str: e.g. 'Homo sapiens', or None if the line has no name field
    """
    if not info_line:
        return None

    match = _INFO_LINE.match(info_line.rstrip())
    if not match:
        return None

    rest = match.group('rest')
    if '(' in rest:
        name = rest.split('(', 1)[0]
    else:
        name = re.split(r'\s+KEGG\s', rest, maxsplit=1)[0]

    name = name.strip()
    return name or None


def get_species_name(species, reader=None, base_url=None):
    """
    Resolve a KEGG organism code to its display name.

    Args:
        species: KEGG organism code, e.g. 'hsa'
        reader: FeedReader to use (a new one by default)
        base_url: KEGG REST base URL override

    Returns:
        str: Organism name, e.g. 'Homo sapiens'

    Raises:
        FeedError: if the info feed cannot be fetched or has no name
    """
    url = settings.feed_url('info', species, base_url=base_url)
    if url in _SPECIES_NAMES:
        return _SPECIES_NAMES[url]

    reader = reader or FeedReader()
    first_line = reader.read_first_line(url)

    name = parse_species_name(first_line)
    if name is None:
        raise FeedError(url, f"no organism name in {first_line!r}")

    _SPECIES_NAMES[url] = name
    return name


def clear_species_cache():
    _SPECIES_NAMES.clear()
