"""Base response formatter — Renders a Solr response tree to the wire."""

from __future__ import annotations

from abc import ABC, abstractmethod

from solrbridge.models.params import SolrParams
from solrbridge.models.response import ResponseTree

_TRUTHY = {"true", "on", "yes", "1"}


class ResponseFormatter(ABC):
    """Serialises a response tree for one ``wt`` value."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The ``wt`` value this formatter answers to."""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """HTTP ``Content-Type`` of the rendered output."""

    @abstractmethod
    def format(self, tree: ResponseTree, params: SolrParams) -> str:
        """Render ``tree``.

        Args:
            tree: Response or error tree.
            params: Request parameters (for output options such as ``indent``).

        Returns:
            The serialised body.
        """

    @staticmethod
    def wants_indent(params: SolrParams) -> bool:
        return (params.get("indent") or "").strip().lower() in _TRUTHY
