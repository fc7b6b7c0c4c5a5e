from bookmarks.folder import Folder
from bookmarks.identity import id_for
from bookmarks.models import ARCHIVE, BROWSER, READLATER, ArchiveBookmark, BrowserBookmark, ReadLaterBookmark
from bookmarks.module import Bookmarks, create_bookmarks

__all__ = [
    "ARCHIVE",
    "BROWSER",
    "READLATER",
    "ArchiveBookmark",
    "Bookmarks",
    "BrowserBookmark",
    "Folder",
    "ReadLaterBookmark",
    "create_bookmarks",
    "id_for",
]
