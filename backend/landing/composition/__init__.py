from .composer import ComposedSection, PageComposer
from .translations import SqlTranslationSource, TranslationSource

__all__ = ["ComposedSection", "PageComposer", "SqlTranslationSource", "TranslationSource"]
