"""
Achievement Catalog

An immutable, validated registry of achievement definitions. The catalog is
passed explicitly to the engine, so tests can use small catalogs.
"""

from typing import Any, Iterable, Iterator, Mapping, Optional, Union
import logging

from pydantic import TypeAdapter, ValidationError

from plank_coach.achievements.definitions import default_achievement_entries
from plank_coach.achievements.evaluators import EVALUATORS, MEASURES
from plank_coach.exceptions import CatalogValidationError
from plank_coach.models import AchievementCategory, AchievementDefinition

logger = logging.getLogger(__name__)

_definition_adapter = TypeAdapter(AchievementDefinition)


class AchievementCatalog:
    """
    Read-only set of achievement definitions

    Validation runs once on construction:
    - ids are unique
    - names are unique (names key earned records)
    - every requirement kind has an evaluator and a progress measure

    Raises:
        CatalogValidationError: On the first violated rule
    """

    def __init__(self, definitions: Iterable[AchievementDefinition]):
        self._definitions: tuple[AchievementDefinition, ...] = tuple(definitions)
        self._by_id: dict[str, AchievementDefinition] = {}
        self._by_name: dict[str, AchievementDefinition] = {}

        for definition in self._definitions:
            if definition.id in self._by_id:
                raise CatalogValidationError(
                    f"Duplicate achievement id: {definition.id}",
                    achievement_id=definition.id
                )
            if definition.name in self._by_name:
                raise CatalogValidationError(
                    f"Duplicate achievement name: {definition.name}",
                    achievement_id=definition.id
                )
            if definition.requirement_type not in EVALUATORS or definition.requirement_type not in MEASURES:
                raise CatalogValidationError(
                    f"No evaluator for requirement type {definition.requirement_type.value}",
                    achievement_id=definition.id
                )
            self._by_id[definition.id] = definition
            self._by_name[definition.name] = definition

        logger.debug(f"Achievement catalog loaded with {len(self._definitions)} entries")

    @classmethod
    def from_dicts(cls, entries: Iterable[Mapping[str, Any]]) -> "AchievementCatalog":
        """
        Build a catalog from raw mappings (e.g. loaded from JSON)

        Raises:
            CatalogValidationError: If any entry is malformed, including an
                unknown requirement type
        """
        definitions = []
        for index, entry in enumerate(entries):
            try:
                definitions.append(_definition_adapter.validate_python(entry))
            except ValidationError as e:
                raise CatalogValidationError(
                    f"Invalid achievement definition at index {index}: {e.error_count()} error(s)",
                    achievement_id=entry.get("id") if isinstance(entry, Mapping) else None,
                    context={"errors": e.errors(include_url=False)},
                    cause=e
                )
        return cls(definitions)

    def __iter__(self) -> Iterator[AchievementDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get_by_name(self, name: str) -> Optional[AchievementDefinition]:
        return self._by_name.get(name)

    def get_by_id(self, achievement_id: str) -> Optional[AchievementDefinition]:
        return self._by_id.get(achievement_id)

    def filter_by_category(
        self,
        category: Union[AchievementCategory, str]
    ) -> list[AchievementDefinition]:
        """Entries in a category; "all" returns every entry"""
        if category == "all":
            return list(self._definitions)
        category = AchievementCategory(category)
        return [d for d in self._definitions if d.category == category]

    @property
    def total_points(self) -> int:
        return sum(d.points for d in self._definitions)


def build_default_catalog() -> AchievementCatalog:
    """The production catalog"""
    return AchievementCatalog.from_dicts(default_achievement_entries())
