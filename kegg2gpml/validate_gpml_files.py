#!/usr/bin/env python3
"""
GPML File Validation Script

Validates converted KEGG GPML files for:
1. Well-formed XML with a GPML 2021 Pathway root and board Graphics
2. Exactly one organism on the Pathway element
3. Duplicate and unsanitized element IDs
4. Required DataNode fields (textLabel, type, Xref, Graphics geometry)
5. Column layout: genes at x=65, compounds at x=165, rows 30 apart from y=70

Usage:
    python -m kegg2gpml.validate_gpml_files <gpml_file_or_directory>
"""

import os
import re
import sys
from pathlib import Path
from typing import Dict, List, Any
from dataclasses import dataclass, field
from xml.etree import ElementTree as ET
from collections import defaultdict

from kegg2gpml.utils import layout


# GPML Namespace
GPML_NS = "http://pathvisio.org/GPML/2021"
NS = {"gpml": GPML_NS}

# ID validation regex - must start with letter or underscore, contain only alphanumeric and underscore
VALID_ID_PATTERN = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')

VALID_DATANODE_TYPES = {"GeneProduct", "Metabolite"}

# DataNode type -> expected column center x
COLUMN_X = {
    "GeneProduct": layout.GENE_COLUMN_X,
    "Metabolite": layout.COMPOUND_COLUMN_X,
}


@dataclass
class ValidationError:
    """Represents a validation error"""
    file_path: str
    error_type: str
    message: str
    element_id: str = ""


@dataclass
class ValidationReport:
    """Contains all validation results for one file"""
    file_path: str
    xml_valid: bool = False
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def add_error(self, error_type: str, message: str, element_id: str = ""):
        self.errors.append(ValidationError(
            file_path=self.file_path,
            error_type=error_type,
            message=message,
            element_id=element_id
        ))

    def add_warning(self, message: str):
        self.warnings.append(message)

    def is_valid(self) -> bool:
        return len(self.errors) == 0


class GPMLValidator:
    """Validates GPML files"""

    def __init__(self):
        self.report = None

    def validate_file(self, file_path: str) -> ValidationReport:
        """Validate a single GPML file"""
        self.report = ValidationReport(file_path=file_path)

        try:
            tree = ET.parse(file_path)
            root = tree.getroot()
            self.report.xml_valid = True
        except ET.ParseError as e:
            self.report.add_error("XML_PARSE_ERROR", f"XML parsing failed: {str(e)}")
            return self.report
        except OSError as e:
            self.report.add_error("FILE_ERROR", f"Error reading file: {str(e)}")
            return self.report

        if root.tag != f"{{{GPML_NS}}}Pathway":
            self.report.add_error("INVALID_ROOT", f"Root element is not 'Pathway', got '{root.tag}'")
            return self.report

        datanodes = root.findall("gpml:DataNodes/gpml:DataNode", NS)
        self.report.stats = {
            "datanodes": len(datanodes),
            "genes": sum(1 for d in datanodes if d.get("type") == "GeneProduct"),
            "compounds": sum(1 for d in datanodes if d.get("type") == "Metabolite"),
        }

        self._validate_schema(root)
        self._validate_organism(root)
        self._validate_ids(root)
        self._validate_datanodes(datanodes)
        self._validate_columns(datanodes)

        return self.report

    def _validate_schema(self, root: ET.Element):
        """Validate required pathway attributes and board graphics"""
        if not root.get("title"):
            self.report.add_error("SCHEMA_ERROR", "Missing 'title' attribute on Pathway")

        graphics = root.find("gpml:Graphics", NS)
        if graphics is None:
            self.report.add_error("SCHEMA_ERROR", "Missing Graphics element in Pathway")
        else:
            for attr in ["boardWidth", "boardHeight"]:
                if graphics.get(attr) is None:
                    self.report.add_error("SCHEMA_ERROR", f"Missing '{attr}' in Pathway Graphics")

    def _validate_organism(self, root: ET.Element):
        """Validate organism attribute on Pathway element"""
        organism = root.get("organism")

        if organism is None or organism.strip() == "":
            self.report.add_error(
                "MISSING_ORGANISM",
                "Pathway element missing 'organism' attribute or organism is empty"
            )
            return

        if "," in organism:
            self.report.add_error(
                "MULTIPLE_ORGANISMS",
                f"Pathway has multiple organisms: {organism}. "
                f"Each GPML file must have exactly one organism."
            )

    def _validate_ids(self, root: ET.Element):
        """Check for duplicate and unsanitized element IDs"""
        id_locations = defaultdict(list)

        for element in root.iter():
            elem_id = element.get("elementId")
            if elem_id:
                tag_name = element.tag.split("}")[-1] if "}" in element.tag else element.tag
                id_locations[elem_id].append(tag_name)

        for elem_id, tag_names in id_locations.items():
            if len(tag_names) > 1:
                self.report.add_error(
                    "DUPLICATE_ID",
                    f"Duplicate elementId: '{elem_id}' found in {tag_names}",
                    elem_id
                )
            if not VALID_ID_PATTERN.match(elem_id):
                self.report.add_error(
                    "INVALID_ID_FORMAT",
                    f"Element ID is not a valid xs:ID: '{elem_id}'",
                    elem_id
                )

    def _validate_datanodes(self, datanodes: List[ET.Element]):
        """Validate required fields for each DataNode"""
        for i, datanode in enumerate(datanodes):
            datanode_id = datanode.get("elementId")
            if not datanode_id:
                self.report.add_error(
                    "MISSING_ELEMENT_ID",
                    f"DataNode #{i+1} ('{datanode.get('textLabel', 'UNKNOWN')}') missing elementId attribute"
                )

            if not datanode.get("textLabel"):
                self.report.add_error(
                    "MISSING_REQUIRED_FIELD",
                    f"DataNode '{datanode_id}' missing 'textLabel'",
                    datanode_id
                )

            node_type = datanode.get("type")
            if node_type not in VALID_DATANODE_TYPES:
                self.report.add_error(
                    "INVALID_TYPE",
                    f"DataNode '{datanode_id}' has unexpected type '{node_type}'",
                    datanode_id
                )

            xref = datanode.find("gpml:Xref", NS)
            if xref is None or not xref.get("identifier") or not xref.get("dataSource"):
                self.report.add_warning(f"DataNode '{datanode_id}' has no complete Xref")

            graphics = datanode.find("gpml:Graphics", NS)
            if graphics is None:
                self.report.add_error(
                    "MISSING_REQUIRED_FIELD",
                    f"DataNode '{datanode_id}' missing Graphics element",
                    datanode_id
                )
                continue

            for attr in ["centerX", "centerY", "width", "height"]:
                value = graphics.get(attr)
                if value is None:
                    self.report.add_error(
                        "MISSING_REQUIRED_FIELD",
                        f"DataNode '{datanode_id}' Graphics missing '{attr}'",
                        datanode_id
                    )
                    continue
                try:
                    float(value)
                except ValueError:
                    self.report.add_error(
                        "INVALID_GRAPHICS",
                        f"DataNode '{datanode_id}' Graphics '{attr}' is not numeric: '{value}'",
                        datanode_id
                    )

    def _validate_columns(self, datanodes: List[ET.Element]):
        """Check that genes and compounds form two evenly spaced, separate columns"""
        column_ys = defaultdict(list)

        for datanode in datanodes:
            node_type = datanode.get("type")
            graphics = datanode.find("gpml:Graphics", NS)
            if node_type not in COLUMN_X or graphics is None:
                continue
            try:
                x = float(graphics.get("centerX"))
                y = float(graphics.get("centerY"))
            except (TypeError, ValueError):
                continue

            if x != COLUMN_X[node_type]:
                self.report.add_error(
                    "LAYOUT_ERROR",
                    f"{node_type} '{datanode.get('elementId')}' at x={x}, expected x={COLUMN_X[node_type]}",
                    datanode.get("elementId", "")
                )
            column_ys[node_type].append(y)

        for node_type, ys in column_ys.items():
            expected = [layout.COLUMN_START_Y + i * layout.ROW_SPACING for i in range(len(ys))]
            if ys != expected:
                self.report.add_error(
                    "LAYOUT_ERROR",
                    f"{node_type} column rows are not spaced {layout.ROW_SPACING} apart from y={layout.COLUMN_START_Y}"
                )


def validate_directory(directory: str) -> List[ValidationReport]:
    """Validate all GPML files in a directory"""
    reports = []
    gpml_files = sorted(Path(directory).glob("*.gpml"))

    if not gpml_files:
        print(f"No GPML files found in {directory}")
        return reports

    validator = GPMLValidator()
    for gpml_file in gpml_files:
        reports.append(validator.validate_file(str(gpml_file)))

    return reports


def print_report(report: ValidationReport):
    """Print a validation report"""
    print(f"\n{'='*80}")
    print(f"File: {report.file_path}")
    print(f"{'='*80}")

    for key, value in report.stats.items():
        print(f"  {key}: {value}")

    if report.errors:
        print(f"\nErrors ({len(report.errors)}):")
        for error in report.errors[:20]:
            elem_info = f" (ID: {error.element_id})" if error.element_id else ""
            print(f"  - [{error.error_type}]{elem_info}: {error.message}")
        if len(report.errors) > 20:
            print(f"  ... and {len(report.errors) - 20} more errors")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for warning in report.warnings[:20]:
            print(f"  - {warning}")

    status = "VALID" if report.is_valid() else "INVALID"
    print(f"\nStatus: {status}\n")


def print_summary(reports: List[ValidationReport]):
    """Print summary of all reports"""
    print(f"\n{'='*60}")
    print("VALIDATION SUMMARY")
    print(f"{'='*60}")

    total_files = len(reports)
    valid_files = sum(1 for r in reports if r.is_valid())

    print(f"Total files: {total_files}")
    print(f"Valid files: {valid_files}")
    print(f"Invalid files: {total_files - valid_files}")
    print(f"Gene nodes: {sum(r.stats.get('genes', 0) for r in reports)}")
    print(f"Compound nodes: {sum(r.stats.get('compounds', 0) for r in reports)}")

    all_error_types = defaultdict(int)
    for report in reports:
        for error in report.errors:
            all_error_types[error.error_type] += 1

    if all_error_types:
        print("\nError Types:")
        for error_type, count in sorted(all_error_types.items(), key=lambda x: -x[1]):
            print(f"  {error_type}: {count}")


def main():
    """Main entry point"""
    if len(sys.argv) < 2:
        print("Usage: python -m kegg2gpml.validate_gpml_files <gpml_file_or_directory>", file=sys.stderr)
        sys.exit(1)

    path = sys.argv[1]

    if os.path.isfile(path):
        report = GPMLValidator().validate_file(path)
        print_report(report)
        sys.exit(0 if report.is_valid() else 1)

    elif os.path.isdir(path):
        reports = validate_directory(path)
        for report in reports:
            if not report.is_valid():
                print_report(report)
        print_summary(reports)
        sys.exit(1 if any(not r.is_valid() for r in reports) else 0)

    else:
        print(f"Error: '{path}' is not a file or directory", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
