"""Resolver package for the GraphQL schema.

Every resolver takes the store as its first argument; field resolvers also
take the parent object. The strawberry types, queries and mutations pull the
store out of the request context and delegate here.
"""
