"""CDDB protocol package.

This package provides the command builder, response parser and HTTP
transport used to talk to FreeDB-compatible CGI endpoints.
"""
