# Services package init
"""
PostSearch Backend: Services Layer
====================================

Service Inventory:
    - DocumentStore (abstract): contract for the remote document store
    - OpenSearchStore: DocumentStore backed by AsyncOpenSearch
    - Resource: binds (index, type) to the store's five verbs
    - PostParser: store response shapes → Post shapes / NotFoundError
    - PostsController: Resource + PostParser per REST action
"""
