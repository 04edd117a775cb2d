"""solrbridge — Solr-compatible query endpoint backed by OpenSearch."""

__version__ = "0.1.0"
