"""
PATHFINDER - Career domain exploration engine

Searches, ranks and validates choices against a curated taxonomy of career
domains, subfields, example careers and internships.

Architecture:
- Taxonomy Context: Catalog loading and read-only lookups
- Intake Context: Normalization of filters, selections and skill inputs
- Targeting Context: Relevance scoring, search and domain recommendation
- Validation Context: Selection and assessment-form validation
"""

__version__ = "0.1.0"
