"""Search backend layer — Executes translated requests on the native engine.

Built-in backends:
  - opensearch: OpenSearch v2+ via ``opensearch-py`` (async)

Implement ``SearchBackend`` to run Solr queries on another engine.
"""
