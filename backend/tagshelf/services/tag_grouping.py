"""
Tagshelf - Tag grouping

Folders name tag prefixes ("tag groups"). While editing a bookmark, every
known tag that extends one of those prefixes is offered under a heading for
its prefix, e.g. prefix ``winter`` collects ``winter-mittens`` and
``winter-scarf`` labelled ``mittens`` and ``scarf``.
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .models import Bookmark
from .tree import TagFolder


@dataclass(frozen=True)
class TagChoice:
    """A suggested tag and whether the user picked it."""
    tag: str
    selected: bool = False
    label: Optional[str] = None

    def toggled(self) -> "TagChoice":
        return replace(self, selected=not self.selected)


@dataclass(frozen=True)
class TagGroup:
    prefix: str
    tags: Tuple[TagChoice, ...] = ()

    def selected_tags(self) -> List[str]:
        return [choice.tag for choice in self.tags if choice.selected]


def count_tags(bookmarks: Iterable[Bookmark]) -> Dict[str, int]:
    """Number of bookmarks using each tag, in first-seen order."""
    counts: Dict[str, int] = {}
    for bookmark in bookmarks:
        for tag in dict.fromkeys(bookmark.tags):
            if tag.strip():
                counts[tag] = counts.get(tag, 0) + 1
    return counts


def prioritise_tags(counts: Mapping[str, int]) -> List[TagChoice]:
    """Quick-select choices, most used first."""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [TagChoice(tag=tag, label=f"{tag} ({count})") for tag, count in ranked]


def folder_prefixes(selected_path: Sequence[TagFolder]) -> List[str]:
    """Tag group prefixes along a root-to-leaf folder path, innermost folder first."""
    prefixes = []
    for folder in reversed(selected_path):
        prefixes.extend(sorted(folder.tag_groups))
    return prefixes


def group_tags(prefixes: Iterable[str], vocabulary: Iterable[str]) -> List[TagGroup]:
    """Group ``vocabulary`` under each prefix it extends.

    A prefix matching nothing yields no group and a repeated prefix yields
    a group only once. Tags keep vocabulary order inside a group.
    """
    tags = list(vocabulary)
    groups: List[TagGroup] = []
    emitted = set()
    for prefix in prefixes:
        if prefix in emitted:
            continue
        matches = [tag for tag in tags if tag != prefix and tag.startswith(prefix)]
        if not matches:
            continue
        emitted.add(prefix)
        groups.append(TagGroup(
            prefix=prefix,
            # Label drops the prefix and the separator after it
            tags=tuple(TagChoice(tag=tag, label=tag[len(prefix) + 1:]) for tag in matches),
        ))
    return groups


def group_folder_tags(selected_path: Sequence[TagFolder], vocabulary: Iterable[str]) -> List[TagGroup]:
    """Tag groups for a root-to-leaf folder path."""
    return group_tags(folder_prefixes(selected_path), vocabulary)
