"""
Todo subsystem.

Components:
- todo_models.py: data structures (Todo, Urgency)
- todo_store.py: in-memory ordered list persisted as one JSON blob + mutators
- todo_filter.py: tab/urgency filtering (pure)
- todo_api.py: small high-level helpers used by the presentation layer
"""
