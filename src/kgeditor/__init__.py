"""Metadata enrichment for knowledge-graph editor payloads."""
