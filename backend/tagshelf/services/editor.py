"""
Tagshelf - Bookmark editor

State of one add/edit bookmark session. The client drives it with the
operations below and finally calls :meth:`BookmarkEditor.build_bookmark`.
"""
from dataclasses import replace
from typing import List, Mapping, Optional, Sequence

from .models import Bookmark, new_id
from .tag_grouping import TagChoice, TagGroup, group_folder_tags, prioritise_tags
from .tag_merge import merge_tags, parse_tag_input
from .tree import TagFolder, find_folders, make_root


def selected_path_for(forest: Sequence[TagFolder], path: Optional[str]) -> List[TagFolder]:
    """Root-to-leaf folders for ``path``; empty if it does not resolve."""
    if not path:
        return []
    return list(reversed(find_folders(make_root(forest), path)))


class BookmarkEditor:
    def __init__(
        self,
        bookmark: Optional[Bookmark] = None,
        tag_counts: Optional[Mapping[str, int]] = None,
        forest: Sequence[TagFolder] = (),
        path: Optional[str] = None,
    ):
        self.bookmark_id = bookmark.id if bookmark else None
        self.title = bookmark.title if bookmark else ""
        self.description = bookmark.description if bookmark else ""
        self.url = bookmark.url if bookmark else None
        self.tags: List[str] = list(bookmark.tags) if bookmark else []
        self.image_attachment_id = bookmark.image_attachment_id if bookmark else None

        self.priority_tags: List[TagChoice] = prioritise_tags(tag_counts or {})
        self.folders: List[TagFolder] = list(forest)
        self.selected_folder_path: List[TagFolder] = selected_path_for(self.folders, path)
        self.folder_tag_groups: List[TagGroup] = []
        self._update_folder_tags()

    @property
    def is_new(self) -> bool:
        return self.bookmark_id is None

    def set_tags_text(self, text: str) -> None:
        self.tags = parse_tag_input(text)

    def set_folders(self, forest: Sequence[TagFolder], path: Optional[str] = None) -> None:
        """Take a new folder snapshot and reselect ``path`` in it."""
        self.folders = list(forest)
        self.selected_folder_path = selected_path_for(self.folders, path)
        self._update_folder_tags()

    def select_folder(self, folder: TagFolder) -> None:
        """Append ``folder`` to the selected path, or cut the path back to it."""
        for index, selected in enumerate(self.selected_folder_path):
            if selected.id == folder.id:
                self.selected_folder_path = self.selected_folder_path[:index + 1]
                break
        else:
            self.selected_folder_path = self.selected_folder_path + [folder]
        self._update_folder_tags()

    def remove_last_selected_folder(self) -> None:
        if self.selected_folder_path:
            self.selected_folder_path = self.selected_folder_path[:-1]
            self._update_folder_tags()

    def clear_selected_folders(self) -> None:
        self.selected_folder_path = []
        self._update_folder_tags()

    def toggle_priority_tag(self, tag: str) -> None:
        self.priority_tags = [
            choice.toggled() if choice.tag == tag else choice
            for choice in self.priority_tags
        ]

    def toggle_folder_tag(self, prefix: str, tag: str) -> None:
        groups = []
        for group in self.folder_tag_groups:
            if group.prefix == prefix:
                group = replace(group, tags=tuple(
                    choice.toggled() if choice.tag == tag else choice
                    for choice in group.tags
                ))
            groups.append(group)
        self.folder_tag_groups = groups

    def _update_folder_tags(self) -> None:
        # Suggestions come from the vocabulary, ordered as the priority list
        vocabulary = [choice.tag for choice in self.priority_tags]
        self.folder_tag_groups = group_folder_tags(self.selected_folder_path, vocabulary)

    def merged_tags(self) -> List[str]:
        return merge_tags(
            self.tags,
            [folder.tag for folder in self.selected_folder_path],
            [choice.tag for choice in self.priority_tags if choice.selected],
            [tag for group in self.folder_tag_groups for tag in group.selected_tags()],
        )

    def build_bookmark(self) -> Bookmark:
        """Bookmark to persist, new id for a new bookmark."""
        return Bookmark(
            id=self.bookmark_id or new_id(),
            title=self.title,
            description=self.description,
            url=self.url,
            tags=tuple(self.merged_tags()),
            image_attachment_id=self.image_attachment_id,
        )
