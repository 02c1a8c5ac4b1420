"""
REST API namespaces.
"""
