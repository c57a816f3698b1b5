"""Resource models.

This module decodes parsed manifests into typed resource records.
Decoding is pure; the archive layer owns all filesystem access.
"""
