"""Must-gather archive layer.

This module finds the archive root and resolves manifest paths under it.
It powers summary building and resource lookup for the SDK and CLI.
"""
