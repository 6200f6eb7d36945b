"""Entry use cases."""

from .create_entry_usecase import CreateEntryUseCaseImpl
from .delete_entry_usecase import DeleteEntryUseCaseImpl
from .get_entry_usecase import GetEntryUseCaseImpl
from .list_entries_usecase import ListEntriesUseCaseImpl
from .update_entry_usecase import UpdateEntryUseCaseImpl

__all__ = [
    "CreateEntryUseCaseImpl",
    "DeleteEntryUseCaseImpl",
    "GetEntryUseCaseImpl",
    "ListEntriesUseCaseImpl",
    "UpdateEntryUseCaseImpl",
]
