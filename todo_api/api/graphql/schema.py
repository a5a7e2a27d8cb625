import strawberry

# Import feature queries and mutations
from todo_api.api.graphql.nodes.queries import NodeQuery
from todo_api.api.graphql.users.queries import UserQuery
from todo_api.api.graphql.users.types import User
from todo_api.api.graphql.todos.mutations import TodoMutation
from todo_api.api.graphql.todos.types import Todo

# Define root Query type by combining all feature queries
@strawberry.type
class Query(UserQuery, NodeQuery):
    pass

# Define root Mutation type by combining all feature mutations
@strawberry.type
class Mutation(TodoMutation):
    pass

# Create schema; every Node implementation is listed so interface lookups can reach it
schema = strawberry.Schema(query=Query, mutation=Mutation, types=[Todo, User])
