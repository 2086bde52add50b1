"""
Build Pathways

Runs the KEGG loaders once, then builds and writes one GPML file per
cataloged pathway. A failure while building or writing one pathway is
recorded and the remaining pathways are still processed.
"""

import os
import re

from kegg2gpml.build_functions.mapping_builder import MappingBuilder
from kegg2gpml.build_functions.pathway_builder_core import (
    build_pathway_document, export_pathway_to_gpml
)
from kegg2gpml.parsing_functions.parsing_utils import FeedReader
from kegg2gpml.utils.organism_utils import get_species_name
from kegg2gpml.utils import settings


def output_filename(pathway_id, extension=settings.OUTPUT_EXTENSION):
    safe_pathway_id = re.sub(r'[^a-zA-Z0-9_-]', '_', pathway_id)
    return f"{safe_pathway_id}.{extension}"


def build_individual_pathways(data_model, species_name, output_dir, export=export_pathway_to_gpml):
    """
    Build and write all cataloged pathways.

    Membership entries for ids outside the catalog are never built.

    Args:
        data_model (KeggDataModel): Catalog and membership maps
        species_name (str): Organism display name
        output_dir (str): Directory to save pathway files
        export (callable): export(pathway, filepath), writes one document

    Returns:
        tuple: (built_pathways list, failed_pathways list)
    """
    built_pathways = []
    failed_pathways = []

    records = sorted(data_model.pathway_records.values(), key=lambda r: r.pathway_id)
    total = len(records)

    for i, record in enumerate(records, 1):
        if i % settings.PROGRESS_EVERY == 0:
            print(f"  Progress: {i}/{total} ({i*100//total}%)")

        pathway_id = record.pathway_id
        try:
            pathway = build_pathway_document(
                record, data_model.gene_links, data_model.compound_links, species_name
            )

            filename = output_filename(pathway_id)
            filepath = os.path.join(output_dir, filename)
            export(pathway, filepath)

            built_pathways.append({
                'pathway_id': pathway_id,
                'filename': filename,
                'filepath': filepath,
                'genes': len(data_model.genes_for(pathway_id)),
                'compounds': len(data_model.compounds_for(pathway_id))
            })

        except Exception as e:
            print(f"  Warning: failed to write {pathway_id}: {e}")
            failed_pathways.append({'pathway_id': pathway_id, 'error': str(e)})

    return built_pathways, failed_pathways


def run_conversion(species, output_dir, reader=None, base_url=None, export=export_pathway_to_gpml):
    """
    Convert every KEGG pathway of a species into GPML files in output_dir.

    Transport failures (FeedError) propagate and abort the run before any
    document is written.

    Returns:
        tuple: (data_model, species_name, built_pathways, failed_pathways)
    """
    reader = reader or FeedReader()

    species_name = get_species_name(species, reader=reader, base_url=base_url)

    mapping_builder = MappingBuilder(species, reader=reader, base_url=base_url)
    data_model = mapping_builder.build_all_mappings()
    print(f"{len(data_model.pathway_records)} pathways found for {species_name}.")

    uncataloged = data_model.uncataloged_ids()
    if uncataloged:
        print(f"  {len(uncataloged)} linked pathway id(s) are not in the {species} catalog and are skipped")

    print("Saving pathways as GPML...")
    built_pathways, failed_pathways = build_individual_pathways(
        data_model, species_name, output_dir, export=export
    )

    return data_model, species_name, built_pathways, failed_pathways
