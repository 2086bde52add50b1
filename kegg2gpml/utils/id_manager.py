"""
ID Management utilities for WikiPathways GPML generation.
"""
import re

def sanitize_element_id(element_id):
    """
    Sanitize element IDs for GPML compatibility.

    Args:
        element_id (str): Original element ID, e.g. an Entrez Gene id '1234'

    Returns:
        str: Sanitized element ID safe for GPML, e.g. '_1234'
    """
    if not element_id:
        return element_id

    # restrict to alphanumeric and underscores for compatibility with xs:ID
    sanitized = re.sub(r'[^a-zA-Z0-9_]', '_', element_id)

    # must start with a letter or underscore
    if sanitized and not (sanitized[0].isalpha() or sanitized[0] == '_'):
        sanitized = f"_{sanitized}"

    return sanitized


class IDManager:
    """
    Manages ID mapping and sanitization for the elements of one pathway.

    Ensures all element IDs are unique and GPML-compatible while keeping
    a mapping between original and sanitized IDs.
    """

    def __init__(self):
        self.id_mapping = {}
        self.sanitized_ids = {}  # {sanitized_id: original_id}
        self.id_counter = {}  # {base_id: count}

    def register_id(self, original_id, namespace=None):
        """
        Register and sanitize an ID, ensuring uniqueness.

        The same original ID registered under two namespaces (a gene and a
        compound that share an identifier) gets two distinct sanitized IDs.

        Args:
            original_id (str): Original ID, e.g. 'C00031' or '1234'
            namespace (str): Optional element kind, e.g. 'gene'

        Returns:
            str: Sanitized ID safe for GPML (guaranteed unique)
        """
        key = (namespace, original_id)
        if key not in self.id_mapping:
            base_id = sanitize_element_id(original_id)
            sanitized = base_id

            while sanitized in self.sanitized_ids:
                self.id_counter[base_id] = self.id_counter.get(base_id, 0) + 1
                sanitized = f"{base_id}_{self.id_counter[base_id]}"

            self.id_mapping[key] = sanitized
            self.sanitized_ids[sanitized] = original_id

        return self.id_mapping[key]
