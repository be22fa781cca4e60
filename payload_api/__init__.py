# =============================================================================
# Payload API - Package Initialization
# =============================================================================
"""
Payload API Service

A versioned ingestion endpoint that validates text payloads and persists
them to a relational store. Version 1 keeps the original flat response
shape; version 2 returns structured data, metadata and error objects.
"""

__version__ = "2.0.0"
