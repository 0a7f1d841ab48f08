"""
Host-facing tools: session protocol, filters and bundled hosts.
"""
