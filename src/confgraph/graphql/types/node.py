"""
Node interface for globally identified objects
"""

import strawberry


@strawberry.interface(description="An object with a global ID")
class Node:
    id: strawberry.ID
