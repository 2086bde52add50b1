"""
Module for building the KEGG relational model (Pathway catalog, Pathway -> Gene, Pathway -> Compound).
"""
from kegg2gpml.data_structure.kegg_data_structure import (
    PathwayRecord, FeedStats, KeggDataModel, add_link
)
from kegg2gpml.parsing_functions.parsing_utils import FeedReader, iter_records, strip_prefix
from kegg2gpml.utils import settings

CATALOG_FEED = 'pathways'
GENE_FEED = 'genes'
COMPOUND_FEED = 'compounds'

NAME_SEPARATOR = ' - '


class MappingBuilder:
    def __init__(self, species, reader=None, base_url=None):
        self.species = species
        self.reader = reader or FeedReader()
        self.base_url = base_url

        # Mappings to be built
        self.pathway_records = {}
        self.gene_links = {}
        self.compound_links = {}
        self.feed_stats = {}

    def build_all_mappings(self):
        """
        Run the three loaders and return the combined model.

        Raises:
            FeedError: if any feed cannot be fetched; partial results are discarded
        """
        print("Retrieving pathway list...")
        self.build_pathway_names()
        self._report(CATALOG_FEED)

        print("Retrieving gene lists...")
        self.build_gene_mapping()
        self._report(GENE_FEED)

        # Some reference pathways have no counterpart in this species; those keys
        # stay in the map and are ignored because the catalog defines what is built
        print("Retrieving compound lists...")
        self.build_compound_mapping()
        self._report(COMPOUND_FEED)
        print("Mappings complete!")

        return KeggDataModel(
            species=self.species,
            pathway_records=self.pathway_records,
            gene_links=self.gene_links,
            compound_links=self.compound_links,
            feed_stats=self.feed_stats
        )

    def _feed_url(self, *parts):
        return settings.feed_url(*parts, base_url=self.base_url)

    def _report(self, feed):
        stats = self.feed_stats[feed]
        print(f"  {stats.records_parsed} {feed} records parsed from {stats.lines_read} lines")
        if stats.lines_skipped:
            print(f"  Warning: skipped {stats.lines_skipped} malformed {feed} line(s)")

    def build_pathway_names(self):
        """
        Build the pathway catalog from /list/pathway/<species>.

        Line format: 'path:hsa00010<TAB>Glycolysis / Gluconeogenesis - Homo sapiens (human)'
        """
        stats = FeedStats(feed=CATALOG_FEED)
        self.feed_stats[CATALOG_FEED] = stats
        url = self._feed_url('list', 'pathway', self.species)

        for raw_id, raw_description in iter_records(url, stats, self.reader, keep_remainder=True):
            pathway_id = strip_prefix(raw_id, settings.PATHWAY_PREFIX)

            if NAME_SEPARATOR not in raw_description:
                stats.lines_skipped += 1
                continue
            name = raw_description.split(NAME_SEPARATOR, 1)[0].strip()

            if not pathway_id or not name:
                stats.lines_skipped += 1
                continue

            self.pathway_records[pathway_id] = PathwayRecord(pathway_id=pathway_id, name=name)
            stats.records_parsed += 1

        return self.pathway_records

    def build_gene_mapping(self):
        """
        Build pathway -> genes from /link/<species>/pathway.

        Line format: 'path:hsa00010<TAB>hsa:1234'
        """
        stats = FeedStats(feed=GENE_FEED)
        self.feed_stats[GENE_FEED] = stats
        url = self._feed_url('link', self.species, 'pathway')
        gene_prefix = f"{self.species}:"

        for raw_pathway_id, raw_gene_id in iter_records(url, stats, self.reader):
            pathway_id = strip_prefix(raw_pathway_id, settings.PATHWAY_PREFIX)
            gene_id = strip_prefix(raw_gene_id, gene_prefix)

            if not pathway_id or not gene_id:
                stats.lines_skipped += 1
                continue

            add_link(self.gene_links, pathway_id, gene_id)
            stats.records_parsed += 1

        return self.gene_links

    def build_compound_mapping(self):
        """
        Build pathway -> compounds from /link/pathway/compound.

        The feed is keyed by reference pathways ('map00010'); each key is
        rewritten into the species id space ('hsa00010').

        Line format: 'cpd:C00031<TAB>path:map00010'
        """
        stats = FeedStats(feed=COMPOUND_FEED)
        self.feed_stats[COMPOUND_FEED] = stats
        url = self._feed_url('link', 'pathway', 'compound')

        for raw_compound_id, raw_pathway_id in iter_records(url, stats, self.reader):
            compound_id = self.to_ligand_id(raw_compound_id)
            pathway_id = self.to_species_pathway_id(raw_pathway_id)

            if not compound_id or pathway_id is None:
                stats.lines_skipped += 1
                continue

            add_link(self.compound_links, pathway_id, compound_id)
            stats.records_parsed += 1

        return self.compound_links

    def to_ligand_id(self, raw_compound_id):
        """Strip the 'cpd:', 'gl:' or 'dr:' database prefix: 'gl:G00001' -> 'G00001'."""
        for prefix in settings.LIGAND_PREFIXES:
            if raw_compound_id.startswith(prefix):
                return raw_compound_id[len(prefix):]
        return raw_compound_id

    def to_species_pathway_id(self, raw_pathway_id):
        """
        Rewrite a reference pathway id into this species' id space.

        Args:
            raw_pathway_id: e.g. 'path:map00010'

        Returns:
            str: e.g. 'hsa00010', or None when the id is not a reference pathway
        """
        generic_id = strip_prefix(raw_pathway_id, settings.PATHWAY_PREFIX)
        prefix = settings.GENERIC_PATHWAY_PREFIX

        if not generic_id.startswith(prefix) or len(generic_id) == len(prefix):
            return None
        return self.species + generic_id[len(prefix):]
