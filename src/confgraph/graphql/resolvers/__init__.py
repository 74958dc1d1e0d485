"""Resolver package for GraphQL schema.

Resolvers are plain functions over a ``DataStore`` snapshot and return store
records; GraphQL types wrap the records they return.
"""
