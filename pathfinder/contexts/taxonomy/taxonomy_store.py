"""
Immutable, in-memory store of career domains.

The store is built once (normally from the YAML catalog) and then only read.
Engines receive it through their constructor; there is no module-level
singleton, so tests can build fixture stores of any size with from_dicts().

Examples:
    >>> store = TaxonomyStore.from_yaml()
    >>> store.get_domain("technology-computer-science").name
    'Technology & Computer Science'
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from pathfinder.contexts.taxonomy.domain_data_structure import (
    CareerDomain,
    CareerExample,
    Subfield,
)
from pathfinder.contexts.taxonomy.exceptions import InvalidTaxonomyError, TaxonomyLoadError
from pathfinder.contexts.taxonomy.logger import (
    log_catalog_loaded,
    log_integrity_issue,
)
from pathfinder.utils.text_processing import dedupe_preserving_order

load_dotenv()
DEFAULT_TAXONOMY_PATH = Path(__file__).parent / "data" / "career_domains.yaml"
TAXONOMY_PATH = Path(os.getenv("CAREER_TAXONOMY_PATH") or DEFAULT_TAXONOMY_PATH)


class TaxonomyStore:
    """
    Read-only collection of CareerDomain records with id lookups.

    Domain ids are unique across the store (enforced on construction).

    Attributes:
        source: Path the catalog was loaded from, if any
    """

    def __init__(self, domains: Iterable[CareerDomain], source: Optional[Path] = None):
        """
        Args:
            domains: Domain records in catalog order
            source: Optional catalog path, kept for diagnostics

        Raises:
            InvalidTaxonomyError: If two domains share an id
        """
        self._domains: tuple[CareerDomain, ...] = tuple(domains)
        self._by_id: dict[str, CareerDomain] = {}
        for index, domain in enumerate(self._domains):
            if domain.id in self._by_id:
                raise InvalidTaxonomyError(
                    f"Duplicate domain id '{domain.id}'", location=f"domains[{index}]"
                )
            self._by_id[domain.id] = domain
        self.source = source

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dicts(cls, records: Iterable[dict], source: Optional[Path] = None) -> "TaxonomyStore":
        """
        Build a store from plain domain dicts (snake_case keys).

        Raises:
            InvalidTaxonomyError: If any record is structurally invalid
        """
        domains = [
            CareerDomain.from_dict(record, location=f"domains[{index}]")
            for index, record in enumerate(records)
        ]
        return cls(domains, source=source)

    @classmethod
    def from_yaml(cls, path: Path = None) -> "TaxonomyStore":
        """
        Load the catalog YAML and build a store.

        Args:
            path: Catalog path (defaults to CAREER_TAXONOMY_PATH, falling back
                  to the packaged career_domains.yaml)

        Returns:
            Loaded TaxonomyStore

        Raises:
            TaxonomyLoadError: If the file is missing or is not valid YAML
            InvalidTaxonomyError: If the catalog structure is invalid
        """
        if path is None:
            path = TAXONOMY_PATH
        path = Path(path)

        if not path.exists():
            raise TaxonomyLoadError("Taxonomy catalog not found", path=path)

        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except (OmegaConfBaseException, YAMLError, UnicodeDecodeError) as e:
            raise TaxonomyLoadError("Could not parse taxonomy catalog", path=path, original_error=e) from e

        if not isinstance(data, dict) or not isinstance(data.get("domains"), list):
            raise InvalidTaxonomyError("Catalog must contain a top-level 'domains' list", str(path))

        store = cls.from_dicts(data["domains"], source=path)

        issues = store.integrity_issues()
        log_catalog_loaded(path, len(store), len(issues))
        for issue in issues:
            log_integrity_issue(issue)

        return store

    # =========================================================================
    # COLLECTION PROTOCOL
    # =========================================================================

    @property
    def domains(self) -> tuple[CareerDomain, ...]:
        return self._domains

    def __len__(self) -> int:
        return len(self._domains)

    def __iter__(self) -> Iterator[CareerDomain]:
        return iter(self._domains)

    def __contains__(self, domain_id: object) -> bool:
        return domain_id in self._by_id

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def get_domain(self, domain_id: Optional[str]) -> Optional[CareerDomain]:
        """Return the domain with this id, or None."""
        if not isinstance(domain_id, str):
            return None
        return self._by_id.get(domain_id)

    def get_subfield(self, domain_id: str, subfield_id: str) -> Optional[Subfield]:
        """Return the subfield with this id inside the given domain, or None."""
        domain = self.get_domain(domain_id)
        return domain.get_subfield(subfield_id) if domain else None

    def get_career_example(self, domain_id: str, career_id: str) -> Optional[CareerExample]:
        domain = self.get_domain(domain_id)
        return domain.get_career_example(career_id) if domain else None

    def get_all_domain_names(self) -> list[str]:
        return [domain.name for domain in self._domains]

    def get_all_job_roles(self) -> list[str]:
        """Every subfield job role across the store, deduplicated."""
        return dedupe_preserving_order(
            role for domain in self._domains for subfield in domain.subfields for role in subfield.job_roles
        )

    def get_job_roles_by_domain(
        self, domain_id: Optional[str] = None, experience_level: Optional[str] = None
    ) -> list[str]:
        """
        Job roles from subfields plus career example titles.

        Args:
            domain_id: Restrict to one domain (unknown id -> empty list)
            experience_level: Only include career titles at this level;
                              subfield roles are always included

        Returns:
            Deduplicated list of role titles in discovery order
        """
        if domain_id:
            domain = self.get_domain(domain_id)
            domains = [domain] if domain else []
        else:
            domains = list(self._domains)

        roles = []
        for domain in domains:
            for subfield in domain.subfields:
                roles.extend(subfield.job_roles)
            roles.extend(
                career.title
                for career in domain.career_examples
                if not experience_level or career.experience_level == experience_level
            )

        return dedupe_preserving_order(roles)

    # =========================================================================
    # INTEGRITY
    # =========================================================================

    def integrity_issues(self) -> list[str]:
        """
        Soft integrity problems that do not prevent loading.

        Reports:
        - related_domains entries that reference no domain in the store
        - more than one ExperienceLevelInfo entry for the same level
        - career examples and internships whose subfield_id is unknown

        Returns:
            Human-readable issue descriptions (empty when the catalog is clean)
        """
        issues = []

        for domain in self._domains:
            for related_id in domain.related_domains:
                if related_id not in self._by_id:
                    issues.append(f"{domain.id}: related domain '{related_id}' does not exist")

            levels = [info.level for info in domain.experience_levels]
            for level in dedupe_preserving_order(levels):
                if levels.count(level) > 1:
                    issues.append(
                        f"{domain.id}: {levels.count(level)} experience level entries for '{level}'"
                    )

            subfield_ids = {subfield.id for subfield in domain.subfields}
            for career in domain.career_examples:
                if career.subfield_id not in subfield_ids:
                    issues.append(
                        f"{domain.id}: career '{career.id}' references unknown subfield '{career.subfield_id}'"
                    )
            for internship in domain.internship_opportunities:
                if internship.subfield_id not in subfield_ids:
                    issues.append(
                        f"{domain.id}: internship '{internship.id}' references unknown subfield '{internship.subfield_id}'"
                    )

        return issues
