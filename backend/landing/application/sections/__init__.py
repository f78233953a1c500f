from .create_section import create_section
from .delete_section import delete_section
from .list_sections import get_section, list_sections
from .records import SectionRecord
from .reorder_sections import reorder_sections
from .store import SectionStore, SqlSectionStore
from .toggle_section import toggle_section
from .update_section import update_section

__all__ = [
    "create_section",
    "delete_section",
    "get_section",
    "list_sections",
    "SectionRecord",
    "reorder_sections",
    "SectionStore",
    "SqlSectionStore",
    "toggle_section",
    "update_section",
]
