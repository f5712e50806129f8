# catalog_hierarchy/services/url_service.py
from typing import Optional
from ..models.category import CategoryNode
from ..utils.url_utils import ROOT_URL_KEY, is_blank, slugify
from .hierarchy_service import HierarchyWalker


class URLComposer:
    """Canonical links and url keys for categories"""

    def __init__(self, walker: HierarchyWalker):
        self.walker = walker

    @staticmethod
    def resolve_url_key(category: CategoryNode) -> Optional[str]:
        """Explicit url key, else one derived from the name"""
        if is_blank(category.url_key) and category.name is not None:
            return slugify(category.name)
        return category.url_key

    @staticmethod
    def normalize_url(raw: Optional[str]) -> Optional[str]:
        """Prefix relative links with "/".

        Empty values, rooted paths and protocol-qualified urls (a ":" with
        no "?", or a ":" ahead of the first "?") are returned as given.
        """
        if not raw or raw.startswith("/"):
            return raw
        colon = raw.find(":")
        question = raw.find("?")
        if colon != -1 and (question == -1 or colon < question):
            return raw
        return "/" + raw

    def canonical_link(self, origin: CategoryNode, ignore_top_level_segment: bool = False) -> str:
        """Slash-joined url keys from the root down to origin"""
        link = ""
        leaf_seen = False
        for category in self.walker.default_chain(origin):
            if ignore_top_level_segment and category.is_root:
                continue
            url_key = self.resolve_url_key(category)
            if not leaf_seen:
                # the leaf always contributes, even an empty key
                link = url_key or ""
                leaf_seen = True
            elif url_key is not None and url_key != ROOT_URL_KEY:
                link = f"{url_key}/{link}"
        return link

    def generated_url(self, origin: CategoryNode) -> str:
        return self.canonical_link(origin, False)

    def url(self, category: CategoryNode) -> Optional[str]:
        """The category's own url override, normalized"""
        return self.normalize_url(category.url)
