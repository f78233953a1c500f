from collections import defaultdict
from typing import Dict, List, Protocol

from landing.models.translation import LocalizationString, Translation

RESTAURANT_ENTITY = "restaurant"
LANDING_CONTEXT = "landing"


class TranslationSource(Protocol):
    def restaurant_translations(self, tenant) -> Dict[str, Dict[str, str]]: ...

    def ui_strings(self, language: str) -> Dict[str, str]: ...

    def default_language(self, tenant) -> str: ...


class SqlTranslationSource:
    def __init__(self, context: str = LANDING_CONTEXT):
        self.context = context

    def restaurant_translations(self, tenant) -> Dict[str, Dict[str, str]]:
        """``{lang: {field: value}}`` for the tenant's own translated fields."""
        rows = Translation.query.filter_by(
            entity_type=RESTAURANT_ENTITY,
            entity_id=tenant.id,
        ).all()

        table: Dict[str, Dict[str, str]] = defaultdict(dict)
        for row in rows:
            table[row.language_code][row.field] = row.value
        return dict(table)

    def ui_strings(self, language: str) -> Dict[str, str]:
        rows = LocalizationString.query.filter_by(
            context=self.context,
            language_code=language,
        ).all()
        return {row.key_name: row.label for row in rows}

    def default_language(self, tenant) -> str:
        return getattr(tenant, "default_language", None) or "es"

    def languages(self, tenant) -> List[str]:
        """The tenant's default language first, then every language it has translations for."""
        default = self.default_language(tenant)
        rows = (
            Translation.query.with_entities(Translation.language_code)
            .filter_by(entity_type=RESTAURANT_ENTITY, entity_id=tenant.id)
            .distinct()
            .all()
        )
        return [default] + sorted({code for (code,) in rows} - {default})
