"""Routing — route templates compiled into anchored matchers.

Templates are compiled once, at registration, into immutable patterns;
matched fragments are turned into handler arguments by the extractor.
"""
