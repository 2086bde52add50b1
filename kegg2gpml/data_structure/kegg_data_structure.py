"""
In-memory relational model built from the KEGG REST feeds.

A PathwayRecord per cataloged pathway, plus two membership maps
(pathway id -> set of gene ids, pathway id -> set of compound ids).
Everything is built once per run and only read afterwards.
"""
from dataclasses import dataclass, field
from typing import Dict, Set


@dataclass(frozen=True)
class PathwayRecord:
    pathway_id: str
    name: str


@dataclass
class FeedStats:
    """Line counts for one feed."""
    feed: str
    lines_read: int = 0
    records_parsed: int = 0
    lines_skipped: int = 0


def add_link(links: Dict[str, Set[str]], pathway_id: str, member_id: str) -> None:
    """
    Insert member_id into the set keyed by pathway_id, creating the set on first use.

    Args:
        links: Membership map to update in place
        pathway_id: Key of the set
        member_id: Gene or compound identifier
    """
    if pathway_id not in links:
        links[pathway_id] = set()
    links[pathway_id].add(member_id)


@dataclass
class KeggDataModel:
    species: str
    pathway_records: Dict[str, PathwayRecord] = field(default_factory=dict)
    gene_links: Dict[str, Set[str]] = field(default_factory=dict)
    compound_links: Dict[str, Set[str]] = field(default_factory=dict)
    feed_stats: Dict[str, FeedStats] = field(default_factory=dict)

    def genes_for(self, pathway_id: str) -> Set[str]:
        return self.gene_links.get(pathway_id, set())

    def compounds_for(self, pathway_id: str) -> Set[str]:
        return self.compound_links.get(pathway_id, set())

    def uncataloged_ids(self) -> Set[str]:
        """Membership keys with no PathwayRecord; these never become documents."""
        linked = set(self.gene_links) | set(self.compound_links)
        return linked - set(self.pathway_records)
