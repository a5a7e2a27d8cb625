from todo_api.api.graphql.resolvers.base import BaseResolver, store_errors

__all__ = ['BaseResolver', 'store_errors']
