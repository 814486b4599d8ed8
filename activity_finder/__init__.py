"""
Backend package for the Family Activity Finder.

Contains the FastAPI application plus the prompt, parsing and fallback
helpers around a web-search enabled Claude call.
"""
