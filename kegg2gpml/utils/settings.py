"""
Runtime settings for the KEGG REST converter.

Values can be overridden through environment variables; command line flags
in build_pathways.py take precedence over both.
"""
import os

# KEGG REST endpoints
DEFAULT_KEGG_REST_URL = "https://rest.kegg.jp"
KEGG_REST_URL = os.environ.get('KEGG_REST_URL', DEFAULT_KEGG_REST_URL).rstrip('/')

# Seconds to wait for a connection or for the next chunk of a response
DEFAULT_TIMEOUT = 30.0
try:
    REQUEST_TIMEOUT = float(os.environ.get('KEGG_TIMEOUT', DEFAULT_TIMEOUT))
except ValueError:
    print(f"Warning: ignoring invalid KEGG_TIMEOUT={os.environ.get('KEGG_TIMEOUT')!r}")
    REQUEST_TIMEOUT = DEFAULT_TIMEOUT

# Output
OUTPUT_EXTENSION = "gpml"
PROGRESS_EVERY = 50

# Identifier prefixes used by the KEGG flat feeds
PATHWAY_PREFIX = "path:"
# Ligand entries in /link/pathway/compound: compounds, glycans and drugs
LIGAND_PREFIXES = ("cpd:", "gl:", "dr:")
GENERIC_PATHWAY_PREFIX = "map"

# Xref data sources (BridgeDb names)
GENE_DATA_SOURCE = "Entrez Gene"
COMPOUND_DATA_SOURCE = "KEGG Compound"
PATHWAY_DATA_SOURCE = "KEGG Pathway"
SOURCE_TAG = "KEGG"


def feed_url(*parts, base_url=None):
    """
    Join path segments onto the KEGG REST base URL.

    Example:
        feed_url('link', 'hsa', 'pathway') -> 'https://rest.kegg.jp/link/hsa/pathway'
    """
    base = (base_url or KEGG_REST_URL).rstrip('/')
    return '/'.join([base] + [str(p).strip('/') for p in parts])
