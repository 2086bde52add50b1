#!/usr/bin/env python3
"""
KEGG to WikiPathways GPML Converter
====================================

Converts all KEGG pathways of one organism into GPML files that list the
genes (Entrez Gene) and compounds (KEGG Compound) of each pathway. The KEGG
map layout is not preserved: genes and compounds are stacked in two columns.
The files can be used for pathway statistics in PathVisio, not for
visualization.

Usage:
    python build_pathways.py <species> <output_dir> [options]

Arguments:
    species     : KEGG organism code (e.g. hsa for human)
    output_dir  : Directory where GPML pathway files will be saved (created if missing)

Options:
    --base-url URL : KEGG REST base URL (default: $KEGG_REST_URL or https://rest.kegg.jp)
    --timeout S    : Seconds to wait for each KEGG response (default: $KEGG_TIMEOUT or 30)
    --validate     : Validate the written GPML files after the build

Examples:
    python build_pathways.py hsa ./output
    python build_pathways.py mmu ./output --validate
"""

import argparse
import os
import re
import sys

from kegg2gpml.build_functions.general_pathwaybuilder import run_conversion
from kegg2gpml.parsing_functions.parsing_utils import FeedReader, FeedError
from kegg2gpml.utils import settings
from kegg2gpml import validate_gpml_files

SPECIES_PATTERN = re.compile(r'^[a-z]{2,5}$')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='build_pathways.py',
        description='Convert KEGG pathways of one organism into GPML files.'
    )
    parser.add_argument('species', help='KEGG organism code, e.g. hsa for human')
    parser.add_argument('output_dir', help='Directory where GPML files are saved')
    parser.add_argument('--base-url', default=settings.KEGG_REST_URL,
                        help=f'KEGG REST base URL (default: {settings.KEGG_REST_URL})')
    parser.add_argument('--timeout', type=float, default=settings.REQUEST_TIMEOUT,
                        help=f'Seconds to wait for each KEGG response (default: {settings.REQUEST_TIMEOUT})')
    parser.add_argument('--validate', action='store_true',
                        help='Validate the written GPML files after the build')
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    args.species = args.species.strip().lower()
    if not SPECIES_PATTERN.match(args.species):
        parser.error(f"invalid species code '{args.species}' (expected a KEGG organism code such as 'hsa')")
    if args.timeout <= 0:
        parser.error("--timeout must be positive")

    return args


def main(argv=None):
    """Main execution function. Returns the process exit status."""
    args = parse_args(argv)

    output_dir = os.path.abspath(args.output_dir)
    os.makedirs(output_dir, exist_ok=True)

    print("="*60)
    print("KEGG to WikiPathways GPML Converter")
    print("="*60)
    print(f"Species: {args.species}")
    print(f"Output directory: {output_dir}")
    print(f"KEGG REST: {args.base_url}")
    print("="*60 + "\n")

    reader = FeedReader(timeout=args.timeout)
    try:
        data_model, species_name, built_pathways, failed_pathways = run_conversion(
            args.species, output_dir, reader=reader, base_url=args.base_url
        )
    except FeedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    total = len(data_model.pathway_records)

    print("\n" + "="*60)
    print("BUILD COMPLETE")
    print("="*60)
    print(f"{len(built_pathways)}/{total} pathways converted to GPML and saved in {output_dir}")

    if failed_pathways:
        print(f"\nWarning: {len(failed_pathways)} pathway(s) failed to build:", file=sys.stderr)
        for failure in failed_pathways:
            print(f"  - {failure['pathway_id']}: {failure['error']}", file=sys.stderr)
    print("="*60)

    invalid_files = 0
    if args.validate:
        reports = validate_gpml_files.validate_directory(output_dir)
        for report in reports:
            if not report.is_valid():
                validate_gpml_files.print_report(report)
        validate_gpml_files.print_summary(reports)
        invalid_files = sum(1 for r in reports if not r.is_valid())

    return 1 if failed_pathways or invalid_files else 0


if __name__ == "__main__":
    sys.exit(main())
