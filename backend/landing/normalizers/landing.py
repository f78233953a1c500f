from typing import Any, Dict, List, Optional, Sequence


def normalize_landing(tenant, composed, language: str, languages: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    sections: List[Dict[str, Any]] = [item.to_dict() for item in composed]
    return {
        "restaurant": {
            "id": tenant.id,
            "name": tenant.name,
            "slug": tenant.slug,
        },
        "currentLanguage": language,
        "availableLanguages": list(languages or [language]),
        "sections": sections,
    }
