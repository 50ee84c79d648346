"""Resolver actions for the GraphQL schema.

Root fields never call these directly: they go through the dispatcher in
``contenthub.graphql.operations``, which checks the policy table first.
Field resolvers for related records (``Post.author``, ``User.posts`` ...)
live beside the actions and read the store from the request context.
"""
