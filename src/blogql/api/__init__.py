"""
HTTP API for the blogql server
"""
