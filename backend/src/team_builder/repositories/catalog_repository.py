"""Champion catalog and synergy rule set loaded from the knowledge directory."""
import json
import logging
from pathlib import Path
from typing import Optional

from team_builder.models.champion import Catalog, Champion
from team_builder.models.synergy import SynergyRule

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Read-only access to champion and synergy reference data.

    Expects ``champions.json`` and ``synergies.json`` in the knowledge
    directory, each either a list of documents or ``{"champions": [...]}`` /
    ``{"synergies": [...]}``.
    """

    def __init__(self, knowledge_dir: Optional[Path] = None):
        if knowledge_dir is None:
            knowledge_dir = Path(__file__).parents[4] / "knowledge"
        self.knowledge_dir = Path(knowledge_dir)
        self._champions: list[Champion] = []
        self._synergies: list[SynergyRule] = []
        self._catalog = Catalog()
        self._load_data()

    def _read_documents(self, filename: str, key: str) -> list[dict]:
        path = self.knowledge_dir / filename
        if not path.exists():
            logger.warning(f"{filename} not found at {path}")
            return []
        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load {filename}: {e}")
            return []
        if isinstance(data, dict):
            data = data.get(key, [])
        return data if isinstance(data, list) else []

    def _load_data(self):
        """Load champions and synergy rules, skipping malformed entries."""
        for doc in self._read_documents("champions.json", "champions"):
            try:
                self._champions.append(Champion.from_dict(doc))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed champion entry {doc!r}: {e}")

        seen: set[str] = set()
        for doc in self._read_documents("synergies.json", "synergies"):
            try:
                rule = SynergyRule.from_dict(doc)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed synergy entry {doc!r}: {e}")
                continue
            if rule.name in seen:
                logger.warning(f"Skipping duplicate synergy {rule.name}")
                continue
            seen.add(rule.name)
            self._synergies.append(rule)

        self._catalog = Catalog.from_champions(self._champions)
        logger.info(
            f"Loaded {len(self._champions)} champions and {len(self._synergies)} synergies "
            f"from {self.knowledge_dir}"
        )

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def champions(self) -> list[Champion]:
        return list(self._champions)

    @property
    def synergies(self) -> list[SynergyRule]:
        return list(self._synergies)

    def get_champion(self, champion_id: str) -> Optional[Champion]:
        return self._catalog.get(champion_id)
